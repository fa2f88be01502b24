"""
Model-level tests for clients, bakeries, products and their associations.
"""
import pytest
from sqlalchemy.exc import IntegrityError

from bakery_catalog.models import Bakery, Client, ClientBakeryLink, Product


class TestClientModel:
    def test_bakery_id_reflects_first_link(self, db_session, bakery):
        client = Client(name="Ines")
        assert client.bakery_id is None

        client.bakery_links = [ClientBakeryLink(bakery=bakery)]
        db_session.add(client)
        db_session.commit()
        db_session.refresh(client)

        assert client.bakery_id == bakery.id
        assert client.updated_at is not None

    def test_removing_links_deletes_orphans(self, db_session, bakery):
        client = Client(name="Ines", bakery_links=[ClientBakeryLink(bakery=bakery)])
        db_session.add(client)
        db_session.commit()

        client.bakery_links = []
        db_session.commit()

        assert db_session.query(ClientBakeryLink).count() == 0

    def test_link_requires_existing_bakery(self, db_session):
        client = Client(name="Ines", bakery_links=[ClientBakeryLink(bakery_id=999)])
        db_session.add(client)

        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()


class TestProductModel:
    def test_bakeries_have_set_semantics(self, db_session, bakery):
        product = Product(name="Muffin", stock=1)
        product.bakeries.add(bakery)
        product.bakeries.add(bakery)
        db_session.add(product)
        db_session.commit()
        db_session.refresh(product)

        assert product.bakery_ids == {bakery.id}

    def test_stock_defaults_to_zero(self, db_session):
        product = Product(name="Scone")
        db_session.add(product)
        db_session.commit()

        assert product.stock == 0

    def test_deleting_product_keeps_bakery(self, db_session, bakery):
        product = Product(name="Tart", bakeries={bakery})
        db_session.add(product)
        db_session.commit()

        db_session.delete(product)
        db_session.commit()

        assert db_session.get(Bakery, bakery.id) is not None
