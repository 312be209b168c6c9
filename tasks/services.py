# tasks/services.py
import logging

from .exceptions import NotFoundError, SourceReadError, ValidationError
from .importer import read_task_rows
from .models import Task, new_task_id
from . import partial

logger = logging.getLogger(__name__)


class TaskService:
    """
    The task operations: create, list/search, update, delete, complete and
    bulk import.

    Every write takes ``now``, the timestamp captured once when the request
    entered the service, so all timestamps written by one request are equal.

    Args:
        store (TaskStore): Store client used for all persistence.
        import_path (str or Path): CSV file read by ``import_from_source``.
    """

    def __init__(self, store, import_path=None):
        self.store = store
        self.import_path = import_path

    def create(self, title, description, now):
        task = self.store.create(title, description, now)
        logger.info('Created task %s', task.id)
        return task

    def list(self, title=None, description=None):
        return self.store.search(title=title, description=description)

    def get(self, task_id):
        task = self.store.get(task_id)
        if task is None:
            logger.debug('Task %s not found', task_id)
            raise NotFoundError()
        return task

    def update(self, task_id, title, description, now):
        """
        Apply a partial update.

        Args:
            task_id (str): Id of the task to update.
            title: ``partial.UNSET`` or ``partial.Set(value)``.
            description: ``partial.UNSET`` or ``partial.Set(value)``.
            now (datetime): New ``updated_at``.

        Returns:
            Task: The updated task. ``completed_at`` and ``created_at`` are untouched.
        """
        if not (partial.is_set(title) or partial.is_set(description)):
            raise ValidationError('Title or description is required for update')

        task = self.get(task_id)
        self.store.update(
            task,
            title=partial.resolve(title, task.title),
            description=partial.resolve(description, task.description),
            now=now,
        )
        logger.info('Updated task %s', task.id)
        return task

    def delete(self, task_id):
        task = self.get(task_id)
        self.store.delete(task)
        logger.info('Deleted task %s', task_id)

    def complete(self, task_id, now):
        # Completing an already completed task moves its timestamps forward.
        task = self.get(task_id)
        if task.is_completed:
            logger.info('Task %s already completed at %s, completing again', task.id, task.completed_at)
        self.store.complete(task, now)
        logger.info('Completed task %s', task.id)
        return task

    def bulk_import(self, rows, now):
        """Insert one task per row, all sharing ``now`` as created/updated time."""
        tasks = [
            Task(
                id=new_task_id(),
                title=row.title,
                description=row.description,
                completed_at=row.completed_at,
                created_at=now,
                updated_at=now,
            )
            for row in rows
        ]
        self.store.bulk_insert(tasks)
        logger.info('Imported %d tasks', len(tasks))
        return len(tasks)

    def import_from_source(self, now, path=None):
        path = path or self.import_path
        if path is None:
            logger.error('No import file configured')
            raise SourceReadError()
        rows = read_task_rows(path)
        return self.bulk_import(rows, now)
