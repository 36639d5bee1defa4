from rest_framework import status
from rest_framework.reverse import reverse

from collab.constants.messages import ApiErrors, AppMessages, ValidationErrors
from collab.tests.fixtures.collab import update_payloads
from collab.tests.unit.views.base import StoreViewTestCase


class UpdateListViewTests(StoreViewTestCase):
    def setUp(self):
        super().setUp()
        self.url = reverse("updates")

    def _post_all(self):
        for payload in update_payloads:
            response = self.client.post(self.url, payload, format="json")
            self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_create_update_returns_201(self):
        response = self.client.post(self.url, {"teamName": "Alpha", "updateText": "Kicked off"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data["success"])
        self.assertEqual(response.data["update"]["updateType"], "General")

    def test_create_update_keeps_text_verbatim(self):
        payload = {"teamName": " Alpha ", "updateText": "line\n", "updateType": " Blocker"}

        response = self.client.post(self.url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        update = response.data["update"]
        self.assertEqual(update["teamName"], " Alpha ")
        self.assertEqual(update["updateText"], "line\n")
        self.assertEqual(update["updateType"], " Blocker")
        filtered = self.client.get(self.url, {"teamName": " Alpha "})
        self.assertEqual(filtered.data["count"], 1)

    def test_create_update_missing_fields_returns_400(self):
        response = self.client.post(self.url, {"teamName": "Alpha"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], ValidationErrors.UPDATE_FIELDS_REQUIRED)

    def test_list_updates_newest_first(self):
        self._post_all()

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 3)
        self.assertEqual(
            [u["updateText"] for u in response.data["updates"]],
            ["Demo works end to end", "Waiting on API keys", "Kicked off"],
        )

    def test_list_updates_with_limit_and_team(self):
        self._post_all()

        limited = self.client.get(self.url, {"limit": "1"})
        alpha = self.client.get(self.url, {"teamName": "Alpha"})

        self.assertEqual(limited.data["count"], 1)
        self.assertEqual(limited.data["updates"][0]["updateText"], "Demo works end to end")
        self.assertEqual([u["updateText"] for u in alpha.data["updates"]], ["Demo works end to end", "Kicked off"])

    def test_non_numeric_limit_falls_back_to_default(self):
        self._post_all()

        response = self.client.get(self.url, {"limit": "lots"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 3)


class UpdateDetailViewTests(StoreViewTestCase):
    def test_delete_update(self):
        update = self.store.create_update("Alpha", "Kicked off")
        url = reverse("update_detail", args=[update.id])

        first = self.client.delete(url)
        second = self.client.delete(url)

        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(first.data, {"success": True, "message": AppMessages.UPDATE_DELETED})
        self.assertEqual(second.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(second.data["error"], ApiErrors.UPDATE_NOT_FOUND)
        self.assertEqual(second.data["errors"][0]["source"], {"path": "update_id"})
