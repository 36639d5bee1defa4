from django.urls import path
from collab.views.team import TeamListView
from collab.views.task import TaskListView, TaskDetailView
from collab.views.update import UpdateListView, UpdateDetailView
from collab.views.stats import StatsView, ClearAllView
from collab.views.health import HealthView

urlpatterns = [
    path("teams", TeamListView.as_view(), name="teams"),
    path("tasks", TaskListView.as_view(), name="tasks"),
    path("tasks/<str:task_id>", TaskDetailView.as_view(), name="task_detail"),
    path("updates", UpdateListView.as_view(), name="updates"),
    path("updates/<str:update_id>", UpdateDetailView.as_view(), name="update_detail"),
    path("stats", StatsView.as_view(), name="stats"),
    path("clear-all", ClearAllView.as_view(), name="clear_all"),
    path("health", HealthView.as_view(), name="health"),
]
