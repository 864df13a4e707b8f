from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from argon2.profiles import RFC_9106_LOW_MEMORY

# 用户密码统一使用 argon2id（RFC 9106 低内存参数），全局复用一个实例
pwd_hasher = PasswordHasher.from_parameters(RFC_9106_LOW_MEMORY)


def hash_password(plain_password: str) -> str:
    """
    对注册 / 修改密码时的明文密码做哈希，返回 $argon2id$... 字符串
    """
    return pwd_hasher.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    修改密码时校验旧密码：
    - 不匹配返回 False
    - 库里存的不是合法的 argon2 哈希（例如导入的旧数据）也视为不匹配，不抛 500
    """
    try:
        return pwd_hasher.verify(hashed_password, plain_password)
    except (VerificationError, InvalidHashError):
        return False
