import tests.base_store
import tests.in_memory.base
from crudtodo.backends.in_memory import InMemoryStoreLock
import threading


class InMemoryStoreTest(
    tests.in_memory.base.InMemoryBackendTestMixin, tests.base_store.BaseStoreTest
):
    def test_operations_hold_lock(self):
        self.assertFalse(self.store.lock.is_locked())

        result = self.store.run_in_transaction(callback=self.store.lock.is_locked)
        self.assertTrue(result)
        self.assertFalse(self.store.lock.is_locked())

    def test_lock_released_on_error(self):
        def _fail():
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            self.store.run_in_transaction(callback=_fail)

        self.assertFalse(self.store.lock.is_locked())

    def test_lock_is_reentrant(self):
        lock = InMemoryStoreLock()
        with lock.lock():
            with lock.lock():
                self.assertTrue(lock.is_locked())
            self.assertTrue(lock.is_locked())
        self.assertFalse(lock.is_locked())

    def test_raw_db(self):
        self.store.create("Raw")
        self.store.create("Deleted")
        self.store.delete(2)

        self.assertEqual(
            self.store._get_raw_db(),
            {"todos": {1: {"id": 1, "title": "Raw", "status": False}}, "next_id": 3},
        )

    def test_concurrent_creates(self):
        num_threads = 50
        created_ids = []
        barrier = threading.Barrier(num_threads)

        def _worker(idx):
            barrier.wait()
            todo_id = self.store.create("Todo %d" % idx)
            self.store.update(todo_id, status=True)
            created_ids.append(todo_id)

        threads = [
            threading.Thread(target=_worker, args=(idx,)) for idx in range(num_threads)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(sorted(created_ids), list(range(1, num_threads + 1)))
        self.assertEqual(self.store.peek_next_id(), num_threads + 1)
        for todo_id in created_ids:
            self.assertTrue(self.store.read(todo_id).status)
