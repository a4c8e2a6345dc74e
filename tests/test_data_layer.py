"""Data layer tests.

Covers the domain entities, their table mappings and the repositories,
using a real in-memory SQLite database instead of mocks.
"""

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from src.selectshop.entities import (
    Folder,
    FolderProduct,
    FolderProductRepository,
    FolderRepository,
    FolderTable,
    Product,
    ProductRepository,
    User,
    UserRepository,
    UserRole,
)


class TestEntities:
    def test_user_defaults(self):
        user = User(
            username="robbie", email="robbie@sparta.com", password_hash="secret-hash"
        )

        assert user.id is None
        assert user.role == UserRole.USER
        assert not user.is_admin
        assert "secret-hash" not in repr(user)

    def test_user_equality_ignores_timestamps(self):
        user1 = User(id=1, username="robbie", email="r@sparta.com", password_hash="a")
        user2 = User(id=1, username="robbie", email="r@sparta.com", password_hash="b")

        assert user1 == user2
        assert len({user1, user2}) == 1

    def test_folder_requires_name(self):
        with pytest.raises(ValidationError):
            Folder(name="", user_id=1)

    def test_folder_summary(self):
        folder = Folder(id=7, name="전자기기", user_id=1)

        summary = folder.summary()

        assert (summary.id, summary.name) == (7, "전자기기")

    def test_product_rejects_negative_price(self):
        with pytest.raises(ValidationError):
            Product(title="t", image="i", link="l", lprice=-1, user_id=1)


class TestUserRepository:
    def test_create_and_lookup(self, session: Session):
        repo = UserRepository(session)

        created = repo.create(
            User(username="robbie", email="robbie@sparta.com", password_hash="h")
        )

        assert created.id is not None
        assert repo.get(created.id) == created
        assert repo.get_by_username("robbie") == created
        assert repo.get_by_username("nobody") is None
        assert repo.exists_by_email("robbie@sparta.com")
        assert not repo.exists_by_email("other@sparta.com")

    def test_username_unique(self, session: Session, owner: User):
        with pytest.raises(IntegrityError):
            UserRepository(session).create(
                User(username=owner.username, email="new@sparta.com", password_hash="h")
            )


class TestFolderRepository:
    def test_create_many_assigns_ids_in_order(self, session: Session, owner: User):
        repo = FolderRepository(session)

        created = repo.create_many(
            [Folder(name="a", user_id=owner.id), Folder(name="b", user_id=owner.id)]
        )

        assert [f.name for f in created] == ["a", "b"]
        assert created[0].id < created[1].id
        assert repo.list_by_user(owner.id) == created

    def test_names_by_user_is_owner_scoped(
        self, session: Session, owner: User, other_user: User, make_folder
    ):
        make_folder("mine", owner)
        make_folder("theirs", other_user)

        names = FolderRepository(session).names_by_user(owner.id, ["mine", "theirs", "new"])

        assert names == {"mine"}

    def test_owner_and_name_unique(self, session: Session, owner: User, make_folder):
        make_folder("dup", owner)

        with pytest.raises(IntegrityError):
            FolderRepository(session).create_many([Folder(name="dup", user_id=owner.id)])

    def test_rows_match_entities(self, session: Session, owner: User, make_folder):
        folder = make_folder("전자기기", owner)

        row = session.exec(select(FolderTable).where(FolderTable.id == folder.id)).one()

        assert (row.name, row.user_id) == ("전자기기", owner.id)


class TestProductRepository:
    def test_update(self, session: Session, owner: User, make_product):
        product = make_product("phone", owner)
        product.myprice = 5000

        updated = ProductRepository(session).update(product)

        assert updated.myprice == 5000
        assert ProductRepository(session).get(product.id).myprice == 5000

    def test_update_missing_raises(self, session: Session, owner: User):
        ghost = Product(id=999, title="t", image="i", link="l", lprice=1, user_id=owner.id)

        with pytest.raises(ValueError):
            ProductRepository(session).update(ghost)

    def test_list_by_user_and_all(
        self, session: Session, owner: User, other_user: User, make_product
    ):
        mine = make_product("mine", owner)
        theirs = make_product("theirs", other_user)
        repo = ProductRepository(session)

        assert repo.list_by_user(owner.id) == [mine]
        assert repo.list_all() == [mine, theirs]


class TestFolderProductRepository:
    def test_link_and_exists(self, session: Session, owner: User, make_folder, make_product):
        folder = make_folder("f", owner)
        product = make_product("p", owner)
        repo = FolderProductRepository(session)

        assert not repo.exists(folder.id, product.id)
        repo.create(FolderProduct(folder_id=folder.id, product_id=product.id))

        assert repo.exists(folder.id, product.id)
        assert repo.products_in_folder(folder.id, owner.id) == [product]
        assert repo.folders_of_product(product.id) == [folder]

    def test_pair_unique(
        self, session: Session, owner: User, make_folder, make_product, link_product
    ):
        folder = make_folder("f", owner)
        product = make_product("p", owner)
        link_product(product, folder)

        with pytest.raises(IntegrityError):
            FolderProductRepository(session).create(
                FolderProduct(folder_id=folder.id, product_id=product.id)
            )
