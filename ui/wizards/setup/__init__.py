# -*- coding: utf-8 -*-
"""
Setup Wizard Package.

First-run configuration of the platform: system requirements, database,
administrator account, site details, email, payment and security keys.
"""

from .setup_context import SetupContext
from .steps import SETUP_STEPS
from .setup_wizard import SetupController, SetupWizard, create_setup_controller

__all__ = [
    'SetupContext',
    'SETUP_STEPS',
    'SetupController',
    'SetupWizard',
    'create_setup_controller'
]
