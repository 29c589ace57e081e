from django.core.management.base import BaseCommand, CommandError

from admissions.utils.email import check_email_connection


class Command(BaseCommand):
    help = 'Checks that the configured email backend accepts a connection'

    def handle(self, *args, **options):
        if not check_email_connection():
            raise CommandError("Email service connection failed")
        self.stdout.write(self.style.SUCCESS("Email service connection verified"))
