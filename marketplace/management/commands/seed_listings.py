from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from marketplace.api_client import get_client
from marketplace.constants import SEED_FLAG_KEY
from marketplace.exceptions import AuthFailed
from marketplace.services.seed import seed_database
from marketplace.session import SessionStore
from marketplace.storage import FileStorage


class Command(BaseCommand):
    help = "Fill an empty data service with sample listings (development only)."

    def add_arguments(self, parser):
        parser.add_argument("--email", required=True, help="Account that will own the sample listings")
        parser.add_argument("--password", required=True)
        parser.add_argument(
            "--state-file",
            default=str(settings.MARKETPLACE_SEED_STATE_FILE),
            help="JSON file holding the session and the seed flag",
        )
        parser.add_argument("--force", action="store_true", help="Ignore the seed flag")

    def handle(self, *args, **options):
        storage = FileStorage(options["state_file"])
        if options["force"]:
            storage.remove_item(SEED_FLAG_KEY)

        store = SessionStore(storage, get_client())
        store.restore()
        if not store.is_authenticated:
            try:
                store.login(options["email"], options["password"])
            except AuthFailed as e:
                raise CommandError(e.message)

        created = seed_database(store, storage)
        if created:
            self.stdout.write(self.style.SUCCESS(f"Created {created} sample listings."))
        else:
            self.stdout.write("Nothing to seed.")
