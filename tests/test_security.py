from blogapi.core.security import hash_password, verify_password


def test_hash_is_argon2id():
    hashed = hash_password("secret")
    assert hashed.startswith("$argon2id$")
    assert hashed != hash_password("secret")


def test_verify_password():
    hashed = hash_password("secret")
    assert verify_password("secret", hashed) is True
    assert verify_password("wrong", hashed) is False


def test_verify_against_malformed_hash():
    assert verify_password("secret", "plain-text-password") is False
