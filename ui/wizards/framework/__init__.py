# -*- coding: utf-8 -*-
"""
Wizard Framework - Unified Wizard System for BnOverseas Admin.

Provides base classes and utilities for creating multi-step wizards
with consistent navigation, validation, and state management.
"""

from .base_wizard import BaseWizard, PublishableWizard, WizardDialog
from .base_step import FieldSpec, StepDefinition, StepValidationResult
from .wizard_context import GroupSchema, WizardContext
from .step_navigator import StepNavigator

__all__ = [
    'BaseWizard',
    'PublishableWizard',
    'WizardDialog',
    'FieldSpec',
    'StepDefinition',
    'StepValidationResult',
    'GroupSchema',
    'WizardContext',
    'StepNavigator'
]
