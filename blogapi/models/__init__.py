# 导入全部模型，保证 Base.metadata 中注册了所有表
from blogapi.models.base import Base
from blogapi.models.user import User, UserRole
from blogapi.models.post_category import PostCategory
from blogapi.models.post import Post
from blogapi.models.comment import Comment
from blogapi.models.child_comment import ChildComment
from blogapi.models.like_post import LikePost
from blogapi.models.report import ReportTarget, ReportPost, ReportComment, ReportChildComment
from blogapi.models.static_page import StaticPage
