from unittest.mock import patch

from rest_framework import status
from rest_framework.reverse import reverse
from rest_framework.test import APISimpleTestCase, APIClient

from collab.store.collaboration_store import CollaborationStore
from collab.views.base import StoreAPIView


class CollaborationFlowTests(APISimpleTestCase):
    """Walks a team from registration through task completion to the dashboard."""

    def setUp(self):
        self.client = APIClient()
        patcher = patch.object(StoreAPIView, "store", CollaborationStore())
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_team_task_update_and_stats(self):
        team_response = self.client.post(reverse("teams"), {"teamName": "Alpha", "memberCount": 3}, format="json")
        self.assertEqual(team_response.status_code, status.HTTP_201_CREATED)

        task_response = self.client.post(
            reverse("tasks"), {"teamName": "Alpha", "taskTitle": "Design doc", "priority": "High"}, format="json"
        )
        self.assertEqual(task_response.status_code, status.HTTP_201_CREATED)
        task_id = task_response.data["task"]["id"]

        patch_response = self.client.patch(reverse("task_detail", args=[task_id]), {"status": "Completed"}, format="json")
        self.assertEqual(patch_response.data["task"]["status"], "Completed")

        self.client.post(reverse("updates"), {"teamName": "Alpha", "updateText": "Design signed off"}, format="json")

        stats = self.client.get(reverse("stats")).data["stats"]
        self.assertEqual(stats["totalTeams"], 1)
        self.assertEqual(stats["totalTasks"], 1)
        self.assertEqual(stats["totalUpdates"], 1)
        self.assertEqual(stats["tasksByStatus"], {"To Do": 0, "In Progress": 0, "Completed": 1})
        self.assertEqual(stats["tasksByPriority"], {"High": 1, "Medium": 0, "Low": 0})

        completed = self.client.get(reverse("tasks"), {"teamName": "Alpha", "status": "Completed"})
        self.assertEqual([task["id"] for task in completed.data["tasks"]], [task_id])

        self.assertEqual(self.client.delete(reverse("clear_all")).status_code, status.HTTP_200_OK)
        self.assertEqual(self.client.get(reverse("teams")).data["count"], 0)
        self.assertEqual(self.client.get(reverse("updates")).data["count"], 0)
