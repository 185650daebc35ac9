import sys

from django.core.management.base import BaseCommand
from django.db import transaction

from storefront.item.models import Item
from storefront.user.models import User


class Command(BaseCommand):
    help = "Populate database with sample data"

    @transaction.atomic
    def handle(self, *args, **options):
        admin = User.objects.filter(email="admin@example.com").first()
        if admin is None:
            admin = User.objects.create_superuser(
                email="admin@example.com",
                password="admin123",  # nosec B106  # gitleaks:allow
                name="Admin",
            )
            sys.stdout.write(f"* Created admin user: {admin.email}\n")

        if not User.objects.filter(email="test@example.com").exists():
            user = User.objects.create_user(
                email="test@example.com",
                password="test123",  # nosec B106  # gitleaks:allow
                name="Test User",
            )
            sys.stdout.write(f"* Created test user: {user.email}\n")

        items_data = [
            {
                "title": "Belt",
                "description": "Black leather belt",
                "price": 2500,
            },
            {
                "title": "Boots",
                "description": "Waterproof hiking boots",
                "price": 12000,
            },
            {
                "title": "Hat",
                "description": "Wool beanie",
                "price": 1500,
            },
            {
                "title": "Jacket",
                "description": "Rain jacket with hood",
                "price": 8999,
            },
        ]

        for item_data in items_data:
            item, created = Item.objects.get_or_create(
                title=item_data["title"],
                defaults={**item_data, "user": admin},
            )
            if created:
                sys.stdout.write(f"* Created item: {item.title}\n")

        sys.stdout.write(self.style.SUCCESS("\nDatabase populated successfully!\n"))
        sys.stdout.write("\nYou can now sign in with:\n")
        sys.stdout.write("  Email: admin@example.com\n")
        sys.stdout.write("  Password: admin123\n\n")  # gitleaks:allow
        sys.stdout.write("Or use test user:\n")
        sys.stdout.write("  Email: test@example.com\n")
        sys.stdout.write("  Password: test123\n")  # gitleaks:allow
