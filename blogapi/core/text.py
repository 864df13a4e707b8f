from slugify import slugify


def make_slug(title: str) -> str:
    """
    由标题生成 slug：
    - 统一小写
    - 不做去重，同名标题会得到相同的 slug
    """
    return slugify(title or "").lower()


def like_pattern(term: str) -> str:
    """把用户输入转成 LIKE 子串匹配模式，转义 % 和 _（转义符为反斜杠）"""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
