import logging
from django.apps import apps
from django.contrib.auth.models import User
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from company.models import Company, TenantModel
from user.models import UserProfile

logger = logging.getLogger(__name__)


def tenant_models():
    return [m for m in apps.get_models() if issubclass(m, TenantModel)]


class Command(BaseCommand):
    help = (
        "Make sure a developer user has a company and move every business "
        "record that has no company into it."
    )

    def add_arguments(self, parser):
        parser.add_argument("username", help="Username of the developer account.")
        parser.add_argument(
            "--dry-run", action="store_true",
            help="Report what would be assigned without writing anything.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        try:
            user = User.objects.get(username=options["username"])
        except User.DoesNotExist:
            raise CommandError(f"User '{options['username']}' does not exist.")

        profile = UserProfile.objects.filter(user=user).first()
        if profile is None or profile.role != UserProfile.ROLE_DEVELOPER:
            raise CommandError(f"User '{user.username}' is not a developer.")

        company = profile.company
        if company is None and options["dry_run"]:
            company = Company(name=f"{profile.name or user.username}'s Company")
            self.stdout.write(f"Would create company '{company.name}'.")
        elif company is None:
            company = Company.objects.create(
                name=f"{profile.name or user.username}'s Company", owner=user)
            profile.company = company
            profile.save()
            self.stdout.write(f"Created company '{company.name}'.")

        total = 0
        for model in tenant_models():
            orphans = model._default_manager.orphans()
            count = orphans.count()
            if not count:
                continue
            if not options["dry_run"]:
                orphans.update(company=company)
            total += count
            self.stdout.write(f"{model._meta.label}: {count}")

        verb = "Would assign" if options["dry_run"] else "Assigned"
        logger.info("%s %s orphan rows to company %s", verb, total, company.pk)
        self.stdout.write(self.style.SUCCESS(
            f"{verb} {total} records to '{company.name}'."))
