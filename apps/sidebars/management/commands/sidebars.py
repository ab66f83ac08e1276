from __future__ import annotations

import json
from html import unescape

from django.apps import apps
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "List registered sidebars and their widget counts."

    def add_arguments(self, parser):
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print the sidebars as JSON.",
        )

    def handle(self, *args, **options):  # type: ignore[override]
        host = apps.get_app_config("sidebars").sidebars.host
        rows = [
            {
                "id": area.id,
                "name": unescape(area.name),
                "description": unescape(area.description),
                "editable": area.editable,
                "widgets": len(host.widgets_for(area.id)),
            }
            for area in host.iter_areas()
        ]

        if options["json"]:
            self.stdout.write(json.dumps(rows, indent=2))
            return

        if not rows:
            self.stdout.write("No sidebars registered.")
            return

        for row in rows:
            flag = "editable" if row["editable"] else "fixed"
            self.stdout.write(f"{row['id']}: {row['name']} ({flag}, {row['widgets']} widgets)")
