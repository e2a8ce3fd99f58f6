"""
Database models package
"""
from quiz_api.models.test import Test
from quiz_api.models.question import Question
from quiz_api.models.tag import Tag, TestTag
from quiz_api.models.result import Result
from quiz_api.models.review import Review
from quiz_api.models.user import User
from quiz_api.models.admin_log import AdminLog

__all__ = ["Test", "Question", "Tag", "TestTag", "Result", "Review", "User", "AdminLog"]
