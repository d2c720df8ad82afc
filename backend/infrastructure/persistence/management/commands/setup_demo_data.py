"""\
Setup Demo Data Command.

Purpose:
- Clear operational data (projects, logistics, materials, small jobs, BOQ, uploads).
- Seed the workshop demo dataset: nine active projects, nine deliveries/pickups
  spread over the coming working days, some missing materials and small jobs.

This command is intended for local demo environments.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from domain.logistics.calendar import next_working_days
from domain.shared.value_objects import ProjectCriterion
from infrastructure.persistence.models import (
    BOQItem,
    Delivery,
    MissingMaterial,
    Project,
    ProjectSequence,
    SmallJob,
    Upload,
)


@dataclass(frozen=True)
class DemoProjectSpec:
    name: str
    criteria_done: int
    description: str = ''


@dataclass(frozen=True)
class DemoEventSpec:
    type: str
    working_day: int  # 0 = today (or next working day)
    project: str
    location: str
    time: str


DEMO_PROJECTS = [
    DemoProjectSpec('City Center Office Building', 2, 'Steel frame for a 6-storey office block'),
    DemoProjectSpec('Metro Station Renovation', 4, 'Platform canopies and stair stringers'),
    DemoProjectSpec('Riverside Apartments', 1, 'Balcony frames and railings'),
    DemoProjectSpec('Tech Park Phase II', 5),
    DemoProjectSpec('Harbor View Hotel', 1),
    DemoProjectSpec('Green Valley Residential', 3),
    DemoProjectSpec('Community Health Center', 3),
    DemoProjectSpec('Sports Complex Extension', 1),
    DemoProjectSpec('University Science Building', 4),
]

DEMO_EVENTS = [
    DemoEventSpec('delivery', 0, 'City Center Office Building', '123 Main St, Downtown', '09:30 AM'),
    DemoEventSpec('pickup', 0, 'Riverside Apartments', '456 River Rd, Eastside', '02:15 PM'),
    DemoEventSpec('delivery', 1, 'Metro Station Renovation', '789 Transit Way, Downtown', '10:00 AM'),
    DemoEventSpec('pickup', 2, 'Harbor View Hotel', '321 Harbor Dr, Waterfront', '08:45 AM'),
    DemoEventSpec('delivery', 2, 'Community Health Center', '555 Wellness Ave, Northside', '11:30 AM'),
    DemoEventSpec('delivery', 3, 'Tech Park Phase II', '888 Innovation Blvd, Tech District', '09:00 AM'),
    DemoEventSpec('pickup', 4, 'Sports Complex Extension', '777 Athletic Dr, Westside', '03:30 PM'),
    DemoEventSpec('delivery', 5, 'University Science Building', '101 Campus Dr, University District', '10:45 AM'),
    DemoEventSpec('pickup', 5, 'Green Valley Residential', '222 Valley Rd, Southside', '01:15 PM'),
]

DEMO_MATERIALS = [
    ('City Center Office Building', 'HEA 200', 'S355', Decimal('12'), 'pieces', 'missing'),
    ('City Center Office Building', 'RHS 100x50x5', 'S355', Decimal('48'), 'meters', 'quoted'),
    ('Metro Station Renovation', 'Flat bar 80x10', 'S275', Decimal('36'), 'meters', 'ordered'),
    ('Riverside Apartments', 'CHS 42.4x3', 'S235', Decimal('120'), 'meters', 'ordered'),
    ('Tech Park Phase II', 'IPE 300', 'S355', Decimal('6'), 'pieces', 'missing'),
]

DEMO_SMALL_JOBS = [
    ('Repair gate hinge', 'SO-1041', 'pending'),
    ('Cut base plates for stock', None, 'in-progress'),
    ('Weld trailer bracket', 'SO-1038', 'completed'),
]


class Command(BaseCommand):
    help = 'Reset operational data and seed demo dataset'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Only clear operational data (no seeding)'
        )
        parser.add_argument(
            '--seed',
            action='store_true',
            help='Only seed demo data (no clearing)'
        )
        parser.add_argument(
            '--password',
            type=str,
            default='demo123',
            help='Password for the demo user'
        )

    def handle(self, *args, **options):
        only_clear = bool(options.get('clear'))
        only_seed = bool(options.get('seed'))

        # Default behavior: do both (clear + seed)
        do_clear = not only_seed
        do_seed = not only_clear

        with transaction.atomic():
            if do_clear:
                self.stdout.write('Clearing operational data...')
                self._clear_operational_data()
                self.stdout.write(self.style.SUCCESS('Operational data cleared.'))

            if do_seed:
                self.stdout.write('Seeding demo data...')
                user = self._ensure_demo_user(options['password'])
                counts = self._seed(user)
                self.stdout.write(self.style.SUCCESS(
                    'Demo data created: '
                    + ', '.join(f'{name}={count}' for name, count in counts.items())
                ))

    def _clear_operational_data(self):
        for model in (Upload, BOQItem, MissingMaterial, Delivery, SmallJob, Project, ProjectSequence):
            deleted, _ = model.objects.all().delete()
            self.stdout.write(f'  {model.__name__}: {deleted}')

    def _ensure_demo_user(self, password):
        User = get_user_model()
        user, created = User.objects.get_or_create(
            username='demo',
            defaults={'email': 'demo@example.com', 'first_name': 'Demo', 'is_staff': True}
        )
        if created:
            user.set_password(password)
            user.save(update_fields=['password'])
            self.stdout.write(f'  Created user demo / {password}')
        return user

    def _seed(self, user):
        criteria_keys = ProjectCriterion.keys()
        projects = {}
        for demo in DEMO_PROJECTS:
            flags = {key: index < demo.criteria_done for index, key in enumerate(criteria_keys)}
            projects[demo.name] = Project.objects.create(
                name=demo.name,
                description=demo.description,
                created_by=user,
                updated_by=user,
                **flags
            )

        days = next_working_days(timezone.localdate(), 6)
        for event in DEMO_EVENTS:
            Delivery.objects.create(
                type=event.type,
                date=days[event.working_day],
                time=datetime.strptime(event.time, '%I:%M %p').time(),
                project=projects[event.project],
                location=event.location,
                created_by=user,
                updated_by=user,
            )

        for project_name, material, grade, quantity, unit, status in DEMO_MATERIALS:
            MissingMaterial.objects.create(
                project=projects[project_name],
                material_name=material,
                steel_grade=grade,
                quantity=quantity,
                unit=unit,
                status=status,
                ordered_at=timezone.now() if status == 'ordered' else None,
                created_by=user,
                updated_by=user,
            )

        for title, order_number, status in DEMO_SMALL_JOBS:
            SmallJob.objects.create(
                title=title,
                order_number=order_number,
                status=status,
                created_by=user,
                updated_by=user,
            )

        return {
            'projects': len(projects),
            'deliveries': len(DEMO_EVENTS),
            'materials': len(DEMO_MATERIALS),
            'small_jobs': len(DEMO_SMALL_JOBS),
        }
