from django.core.management.base import BaseCommand

from apps.tasks.dtos import TaskCreateDTO, TaskFilterDTO, TaskUpdateDTO
from apps.tasks.models import TaskStatus
from apps.tasks.repository import TaskRepository
from apps.tasks.services import TaskService

SAMPLE_TASKS = [
    ("Buy milk", "Two litres, semi-skimmed"),
    ("Renew passport", None),
    ("Book dentist appointment", "Any weekday morning"),
    ("Water the plants", None),
    ("Prepare quarterly report", "Numbers from finance arrive on Monday"),
    ("Call the landlord", "About the broken heater"),
    ("Fix bike puncture", None),
    ("Plan weekend trip", "Check train times first"),
]


class Command(BaseCommand):
    help = 'Seeds the database with sample tasks.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--count',
            type=int,
            default=5,
            help='Number of tasks to create (default 5)',
        )
        parser.add_argument(
            '--clean',
            action='store_true',
            help='Delete existing tasks before seeding',
        )

    def handle(self, *args, **options):
        service = TaskService(TaskRepository())

        if options['clean']:
            removed = self._clean(service)
            self.stdout.write(self.style.WARNING(f"Deleted {removed} existing tasks"))

        count = max(options['count'], 0)
        for i in range(count):
            title, description = SAMPLE_TASKS[i % len(SAMPLE_TASKS)]
            if i >= len(SAMPLE_TASKS):
                title = f"{title} #{i // len(SAMPLE_TASKS) + 1}"
            task = service.create(TaskCreateDTO(title=title, description=description))
            # Every third task starts out done so status filters have something to show
            if i % 3 == 2:
                service.update(task.id, TaskUpdateDTO(status=TaskStatus.COMPLETED.value))

        self.stdout.write(self.style.SUCCESS(f"Seeded {count} tasks"))

    def _clean(self, service: TaskService) -> int:
        removed = 0
        while True:
            batch = service.list(TaskFilterDTO(limit=100))
            if not batch:
                return removed
            for task in batch:
                service.delete(task.id)
                removed += 1
