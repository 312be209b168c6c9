# tasks/models.py
import uuid
from django.db import models


def new_task_id():
    return str(uuid.uuid4())


class Task(models.Model):
    id = models.CharField(primary_key=True, max_length=36, default=new_task_id, editable=False)
    title = models.TextField(null=True, blank=True)
    description = models.TextField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)
    # Set explicitly from the request timestamp, not via auto_now
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        db_table = 'tasks'
        ordering = ['created_at']

    def __str__(self):
        return self.title or self.id

    @property
    def is_completed(self):
        return self.completed_at is not None
