import threading
from concurrent.futures import ThreadPoolExecutor
from unittest import TestCase

from collab.exceptions.task_exceptions import TaskNotFoundException
from collab.store.collaboration_store import CollaborationStore


class CollaborationStoreConcurrencyTests(TestCase):
    def setUp(self):
        self.store = CollaborationStore()

    def test_concurrent_creates_keep_every_record(self):
        def create_batch(worker: int):
            for index in range(50):
                self.store.create_team(f"Team {worker}-{index}")
                self.store.create_task(f"Team {worker}", f"Task {index}")
                self.store.create_update(f"Team {worker}", f"Update {index}")

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(create_batch, range(8)))

        stats = self.store.compute_stats()
        self.assertEqual(stats.totalTeams, 400)
        self.assertEqual(stats.totalTasks, 400)
        self.assertEqual(stats.totalUpdates, 400)
        self.assertEqual(len({team.id for team in self.store.list_teams()}), 400)
        self.assertEqual(len({task.id for task in self.store.list_tasks()}), 400)

    def test_concurrent_deletes_of_same_task_succeed_once(self):
        task = self.store.create_task("Alpha", "Contended")
        self.store.create_task("Alpha", "Bystander")
        barrier = threading.Barrier(8)
        outcomes = []
        outcomes_lock = threading.Lock()

        def delete():
            barrier.wait()
            try:
                self.store.delete_task(task.id)
                result = "deleted"
            except TaskNotFoundException:
                result = "missing"
            with outcomes_lock:
                outcomes.append(result)

        threads = [threading.Thread(target=delete) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(outcomes.count("deleted"), 1)
        self.assertEqual(outcomes.count("missing"), 7)
        self.assertEqual([t.taskTitle for t in self.store.list_tasks()], ["Bystander"])

    def test_concurrent_status_updates_leave_one_record(self):
        task = self.store.create_task("Alpha", "Contended")
        statuses = ["To Do", "In Progress", "Completed"] * 10

        with ThreadPoolExecutor(max_workers=6) as executor:
            list(executor.map(lambda status: self.store.update_task_status(task.id, status), statuses))

        tasks = self.store.list_tasks()
        self.assertEqual(len(tasks), 1)
        self.assertIn(tasks[0].status, {"To Do", "In Progress", "Completed"})
        self.assertEqual(sum(self.store.compute_stats().tasksByStatus.values()), 1)
