# tasks/store.py
import logging

from django.db import DatabaseError, transaction

from .exceptions import PersistenceError
from .models import Task, new_task_id

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Store client for the ``tasks`` table.

    All database access of the service goes through this class. Each method
    runs independent statements in Django's autocommit mode and converts any
    ``DatabaseError`` into a ``PersistenceError`` carrying a client-safe message.

    Args:
        using (str): Database alias from ``settings.DATABASES``.
    """

    def __init__(self, using='default'):
        self.using = using

    @property
    def objects(self):
        return Task.objects.using(self.using)

    def create(self, title, description, now):
        task = Task(
            id=new_task_id(),
            title=title,
            description=description,
            completed_at=None,
            created_at=now,
            updated_at=now,
        )
        try:
            task.save(using=self.using, force_insert=True)
        except DatabaseError as exc:
            raise self._failure('Failed to create task', exc)
        return task

    def search(self, title=None, description=None):
        queryset = self.objects.all()
        if title:
            queryset = queryset.filter(title__contains=title)
        if description:
            queryset = queryset.filter(description__contains=description)
        try:
            return list(queryset)
        except DatabaseError as exc:
            raise self._failure('Failed to fetch tasks', exc)

    def get(self, task_id):
        """Return the task with ``task_id`` or None when there is no such row."""
        try:
            return self.objects.filter(id=task_id).first()
        except DatabaseError as exc:
            raise self._failure('Failed to fetch task', exc)

    def update(self, task, title, description, now):
        self._save(task, {'title': title, 'description': description, 'updated_at': now},
                   'Failed to update task')
        return task

    def complete(self, task, now):
        self._save(task, {'completed_at': now, 'updated_at': now}, 'Failed to complete task')
        return task

    def delete(self, task):
        try:
            self.objects.filter(id=task.id).delete()
        except DatabaseError as exc:
            raise self._failure('Failed to delete task', exc)

    def bulk_insert(self, tasks):
        """Insert all ``tasks`` as one all-or-nothing bulk insert."""
        if not tasks:
            return []
        try:
            with transaction.atomic(using=self.using):
                return self.objects.bulk_create(tasks)
        except DatabaseError as exc:
            raise self._failure('Failed to import tasks', exc)

    def _save(self, task, changes, message):
        try:
            self.objects.filter(id=task.id).update(**changes)
        except DatabaseError as exc:
            raise self._failure(message, exc)
        for field, value in changes.items():
            setattr(task, field, value)

    def _failure(self, message, exc):
        logger.error('%s: %s', message, exc, exc_info=exc)
        return PersistenceError(message)
