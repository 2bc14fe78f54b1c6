import logging

import uvicorn
from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import connections

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Runs the API under uvicorn and releases database connections on shutdown.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--host',
            default='0.0.0.0',
            help='Interface to bind (default 0.0.0.0)',
        )
        parser.add_argument(
            '--port',
            type=int,
            default=None,
            help='Port to listen on (defaults to the PORT setting)',
        )

    def handle(self, *args, **options):
        host = options['host']
        port = options['port'] or settings.PORT

        self.stdout.write(self.style.SUCCESS(f"TaskMaster API running on http://{host}:{port}"))
        self.stdout.write(f"Environment: {settings.APP_ENV}")

        try:
            # uvicorn traps SIGINT/SIGTERM and returns once connections drain
            uvicorn.run(
                'config.asgi:application',
                host=host,
                port=port,
                lifespan='off',
                log_config=None,
            )
        finally:
            self.stdout.write("Shutting down gracefully...")
            connections.close_all()
            logger.info("Database connections closed")
