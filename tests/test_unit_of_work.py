import unittest

from sqlalchemy import select

from inventory_system.database import Database
from inventory_system.models import Supplier


class UnitOfWorkTest(unittest.TestCase):
    def setUp(self):
        self.database = Database("sqlite://")
        self.database.create_schema()
        self.addCleanup(self.database.dispose)
        self.uow = self.database.unit_of_work()

    def _supplier_names(self):
        db = self.database.session()
        try:
            return db.execute(select(Supplier.name)).scalars().all()
        finally:
            db.close()

    def test_scope_commits_on_success(self):
        with self.uow.scope() as session:
            session.add(Supplier(name="Acme"))
        self.assertEqual(self._supplier_names(), ["Acme"])

    def test_scope_aborts_on_error(self):
        with self.assertRaises(RuntimeError):
            with self.uow.scope() as session:
                session.add(Supplier(name="Acme"))
                session.flush()
                raise RuntimeError("boom")
        self.assertEqual(self._supplier_names(), [])

    def test_explicit_begin_and_abort(self):
        session = self.uow.begin()
        try:
            session.add(Supplier(name="Acme"))
            session.flush()
            self.uow.abort(session)
        finally:
            session.close()
        self.assertEqual(self._supplier_names(), [])

    def test_explicit_begin_and_commit(self):
        session = self.uow.begin()
        try:
            session.add(Supplier(name="Acme"))
            self.uow.commit(session)
        finally:
            session.close()
        self.assertEqual(self._supplier_names(), ["Acme"])


if __name__ == "__main__":
    unittest.main()
