# -*- coding: utf-8 -*-
"""
Setup Context - Aggregate of the setup wizard.
"""

from typing import Any, Dict

from models.setup import SetupConfig
from ui.wizards.framework.wizard_context import WizardContext


class SetupContext(WizardContext):
    """Setup data; a tested connection no longer counts once the URL changes."""

    record_type = SetupConfig
    reset_on_change = {
        "database_url": {"database_tested": False},
    }

    def default_data(self) -> Dict[str, Any]:
        return SetupConfig().to_aggregate()
