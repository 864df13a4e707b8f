import pytest

from blogapi.core.exceptions import InvalidSortField
from blogapi.core.text import make_slug
from blogapi.models.user import UserRole
from blogapi.schemas.post import PostCreate, PostOut
from blogapi.schemas.user import UserCreate
from blogapi.storage.post.SQLAlchemyPostRepository import SQLAlchemyPostRepository
from blogapi.storage.static_page.SQLAlchemyStaticPageRepository import SQLAlchemyStaticPageRepository
from blogapi.storage.user.SQLAlchemyUserRepository import SQLAlchemyUserRepository
from blogapi.storage.query_builder import ListParams


def seed_user(db, username):
    return SQLAlchemyUserRepository(db).create(UserCreate(username=username, password="x"), password="hashed")


def seed_post(db, user_id, title):
    return SQLAlchemyPostRepository(db).create(
        PostCreate(title=title, content="body"),
        slug=make_slug(title),
        user_id=user_id,
    )


@pytest.fixture
def seeded(db_session):
    alice = seed_user(db_session, "alice")
    bob = seed_user(db_session, "bob")
    posts = [
        seed_post(db_session, alice.id, "b first"),
        seed_post(db_session, bob.id, "not mine"),
        seed_post(db_session, alice.id, "a second"),
    ]
    return alice, bob, posts


class TestEqualityFilters:

    def test_list_all_filters_newest_first(self, db_session, seeded):
        alice, _, posts = seeded
        rows = SQLAlchemyPostRepository(db_session).list_all(user_id=alice.id)
        assert [row.id for row in rows] == [posts[2].id, posts[0].id]
        assert all(isinstance(row, PostOut) for row in rows)

    def test_list_all_without_filters(self, db_session, seeded):
        rows = SQLAlchemyPostRepository(db_session).list_all()
        assert len(rows) == 3

    def test_find_and_count_pages_filtered_rows(self, db_session, seeded):
        alice, _, posts = seeded
        repo = SQLAlchemyPostRepository(db_session)

        result = repo.find_and_count(ListParams(page=1, limit=1), user_id=alice.id)
        assert result.count == 2
        assert result.total_pages == 2
        assert [row.id for row in result.rows] == [posts[2].id]

        result = repo.find_and_count(ListParams(page=2, limit=1), user_id=alice.id)
        assert [row.id for row in result.rows] == [posts[0].id]

    def test_find_and_count_sorted(self, db_session, seeded):
        alice, _, _ = seeded
        result = SQLAlchemyPostRepository(db_session).find_and_count(ListParams(sort_by="title"), user_id=alice.id)
        assert [row.title for row in result.rows] == ["b first", "a second"]

    def test_find_and_count_rejects_unknown_sort(self, db_session, seeded):
        with pytest.raises(InvalidSortField):
            SQLAlchemyPostRepository(db_session).find_and_count(ListParams(sort_by="content"))


def test_new_user_gets_default_role(db_session):
    user = seed_user(db_session, "carol")
    assert user.role == UserRole.NORMAL_USER


class TestStaticPageIncrement:

    def test_first_hit_creates_page(self, db_session):
        repo = SQLAlchemyStaticPageRepository(db_session)
        assert repo.increment("home").views == 1
        assert repo.increment("home").views == 2

    def test_concurrent_first_hit_falls_back_to_increment(self, db_session, monkeypatch):
        repo = SQLAlchemyStaticPageRepository(db_session)
        repo.increment("home")

        # 模拟另一个请求在本次查询之后、插入之前已经建好了 home
        real_find = repo._find
        state = {"first": True}

        def racing_find(name):
            if state["first"]:
                state["first"] = False
                return None
            return real_find(name)

        monkeypatch.setattr(repo, "_find", racing_find)

        page = repo.increment("home")
        assert page.views == 2
        assert [p.name for p in repo.list_pages()] == ["home"]
