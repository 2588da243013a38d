"""Seeder for church_latin_modules (modules.json)."""

from typing import Any

from .. import schema
from ..data import extract_number
from ..errors import RecordRejected
from ..fixtures import MODULES_FILE, ModuleData
from ..models import SeedOptions
from .base import Seeder


class ModulesSeeder(Seeder):
    name = "Modules"
    collection_name = schema.MODULES
    fixture = MODULES_FILE
    required_fields = ("id", "name", "description")
    label = "module"

    def build_record(self, data: ModuleData, options: SeedOptions) -> dict[str, Any]:
        # "M01" -> 1
        module_number = extract_number(data["id"])
        if module_number is None:
            raise RecordRejected(f"Invalid module ID format: {data['id']}")

        return {
            "resourceId": f"module_{data['id']}",
            "name": data["name"],
            "description": data["description"],
            "moduleNumber": module_number,
        }
