# tasks/views.py

from rest_framework.views import APIView
from rest_framework.response import Response
from django.utils import timezone
from rest_framework import status
from .serializers import TaskSerializer, TaskInputSerializer, TaskSearchSerializer
from . import partial


class TaskServiceView(APIView):
    """
    Base view for the task endpoints.

    The ``service`` attribute is supplied through ``as_view(service=...)`` in
    the URLconf, so every view works against an explicitly constructed
    TaskService. Errors raised by the service are turned into JSON responses
    by ``tasks.exceptions.task_exception_handler``.
    """
    service = None

    @staticmethod
    def validated(serializer_class, data):
        serializer = serializer_class(data=data)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data


class TaskListView(TaskServiceView):
    """List, search and create tasks."""

    def get(self, request):
        """
        Handle GET requests listing tasks, optionally filtered by substring.

        Query Parameters:
            title (str): Only tasks whose title contains this value.
            description (str): Only tasks whose description contains this value.

        Returns:
            Response: 200 with a JSON array of tasks.
        """
        filters = self.validated(TaskSearchSerializer, request.query_params)
        tasks = self.service.list(
            title=filters.get('title') or None,
            description=filters.get('description') or None,
        )
        return Response(TaskSerializer(tasks, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        """
        Handle POST requests creating a task.

        Request Body:
            title (str, optional), description (str, optional)

        Returns:
            Response: 201 with the created task.
        """
        now = timezone.now()
        data = self.validated(TaskInputSerializer, request.data)
        task = self.service.create(data.get('title'), data.get('description'), now)
        return Response(TaskSerializer(task).data, status=status.HTTP_201_CREATED)


class TaskDetailView(TaskServiceView):
    """Update and delete a single task."""

    def put(self, request, task_id):
        """
        Handle PUT requests updating a task's title and/or description.

        Fields left out of the body keep their stored value; an explicit null clears the field.

        Returns:
            Response: 200 with the updated task; 400 if neither field is
            supplied; 404 if the task does not exist.
        """
        now = timezone.now()
        data = self.validated(TaskInputSerializer, request.data)
        task = self.service.update(
            task_id,
            title=partial.from_mapping(data, 'title'),
            description=partial.from_mapping(data, 'description'),
            now=now,
        )
        return Response(TaskSerializer(task).data, status=status.HTTP_200_OK)

    def delete(self, request, task_id):
        self.service.delete(task_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class TaskCompleteView(TaskServiceView):

    def patch(self, request, task_id):
        """Mark a task completed; completing it again advances the timestamps."""
        now = timezone.now()
        task = self.service.complete(task_id, now)
        return Response(TaskSerializer(task).data, status=status.HTTP_200_OK)


class TaskImportView(TaskServiceView):

    def post(self, request):
        """
        Handle POST requests importing tasks from the configured CSV file.

        All imported tasks share one created_at/updated_at timestamp.

        Returns:
            Response: 201 with ``{"message": ..., "imported": N}``.
        """
        now = timezone.now()
        imported = self.service.import_from_source(now)
        return Response(
            {'message': 'Tasks imported successfully', 'imported': imported},
            status=status.HTTP_201_CREATED,
        )
