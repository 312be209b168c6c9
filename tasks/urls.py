# tasks/urls.py
from django.conf import settings
from django.urls import path
from .services import TaskService
from .store import TaskStore
from .views import TaskListView, TaskDetailView, TaskCompleteView, TaskImportView

# One store client and service for the process, shared by every view.
task_store = TaskStore(using='default')
task_service = TaskService(task_store, import_path=settings.TASKS_IMPORT_FILE)

urlpatterns = [
    path('tasks', TaskListView.as_view(service=task_service), name='task-list'),
    path('tasks/import', TaskImportView.as_view(service=task_service), name='task-import'),
    path('tasks/<str:task_id>', TaskDetailView.as_view(service=task_service), name='task-detail'),
    path('tasks/<str:task_id>/complete', TaskCompleteView.as_view(service=task_service), name='task-complete'),
]
