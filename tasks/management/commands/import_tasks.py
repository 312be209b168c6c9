from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from tasks.exceptions import TaskServiceError
from tasks.services import TaskService
from tasks.store import TaskStore


class Command(BaseCommand):
    help = 'Import tasks from a CSV file (title, description, completed_at columns).'

    def add_arguments(self, parser):
        parser.add_argument(
            '--file',
            dest='path',
            default=None,
            help='CSV file to read. Defaults to the TASKS_IMPORT_FILE setting.',
        )
        parser.add_argument(
            '--database',
            default='default',
            help='Database alias to import into.',
        )

    def handle(self, *args, **options):
        service = TaskService(TaskStore(using=options['database']), import_path=settings.TASKS_IMPORT_FILE)
        path = options['path'] or service.import_path
        try:
            imported = service.import_from_source(timezone.now(), path=path)
        except TaskServiceError as exc:
            raise CommandError(f'{exc.detail} ({path})') from exc
        self.stdout.write(self.style.SUCCESS(f'Imported {imported} tasks from {path}'))
