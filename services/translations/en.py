# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",
    "dialog.success": "Success",
    "dialog.confirm": "Confirm",

    # Buttons
    "button.ok": "OK",
    "button.cancel": "Cancel",
    "button.save": "Save",
    "button.delete": "Delete",
    "button.edit": "Edit",
    "button.previous": "Previous",
    "button.next": "Next",
    "button.submit": "Submit",
    "button.save_draft": "Save Draft",
    "button.publish": "Publish",
    "button.reset_filters": "Reset",
    "button.new_page": "New Page",
    "button.add_group": "Add",
    "button.add_item": "Add item",
    "button.remove": "Remove",
    "button.sign_in": "Sign in",
    "button.test_connection": "Test Database Connection",
    "button.generate": "Generate",
    "button.check_requirements": "Re-check",

    # API / transport errors
    "error.api.generic": "The request failed. Please try again.",
    "error.api.connection": "Could not reach the server. Check your connection and try again.",
    "error.api.timeout": "The server took too long to respond. Please try again.",
    "error.api.invalid_response": "The server sent an unexpected response. Please try again.",
    "error.auth.required": "Your session has expired. Please sign in again.",
    "error.auth.login_failed": "Sign in failed. Check your email and password.",

    # Validation
    "validation.required": "{field} is required",
    "validation.min_length": "{field} must be at least {min_length} characters",
    "validation.max_length": "{field} must be no more than {max_length} characters",
    "validation.pattern": "{field} format is invalid",
    "validation.min": "{field} must be at least {min}",
    "validation.max": "{field} must be no more than {max}",
    "validation.email": "{field} must be a valid email address",
    "validation.number": "{field} must be a number",
    "validation.step_blocked": "Complete \"{step}\" before continuing",
    "validation.fix_errors": "Please fix the highlighted fields",

    # Wizards
    "wizard.progress": "Step {current} of {total}",
    "wizard.submitting": "Saving...",
    "wizard.saved": "Saved successfully",
    "wizard.page_editor.title_create": "New Page",
    "wizard.page_editor.title_edit": "Edit Page",
    "wizard.course.title": "Create New Course",
    "wizard.course.title_edit": "Edit Course",
    "wizard.test.title": "Create New Test",
    "wizard.test.title_edit": "Edit Test",
    "wizard.setup.title": "Initial Setup",
    "wizard.setup.submit": "Complete Setup",
    "wizard.appointment.title": "Book a Consultation",
    "wizard.appointment.submit": "Book Appointment",

    # Course builder
    "course.module_title_required": "Module {index} needs a title",
    "course.lesson_title_required": "Lesson {index} in module \"{module}\" needs a title",
    "course.original_price_lower": "Original price must not be lower than the price",

    # Test builder
    "test.section_name_required": "Section {index} needs a name",
    "test.question_text_required": "Question {index} in section \"{section}\" needs text",
    "test.mcq_needs_options": "Question {index} in section \"{section}\" needs at least 2 options",
    "test.mcq_bad_answer": "Question {index} in section \"{section}\" has a correct answer that is not one of its options",
    "test.price_required": "A paid test needs a price above zero",

    # Setup wizard
    "setup.requirements_unmet": "Some requirements are not met: {checks}",
    "setup.requirements_unknown": "System requirements have not been checked yet",
    "setup.database_untested": "Test the database connection before continuing",
    "setup.database_failed": "Failed to connect to database",
    "setup.database_ok": "Database connection successful",
    "setup.password_mismatch": "Passwords do not match",

    # Appointment booking
    "appointment.date_in_past": "Please select a date that is not in the past",
    "appointment.date_sunday": "Consultations are not available on Sundays",
    "appointment.invalid_slot": "Please select one of the available time slots",
    "appointment.terms_required": "You must agree to the terms and conditions",
    "appointment.load_failed": "Could not load consultants and consultation types",

    # Lists
    "list.empty": "No results match the current filters",
    "list.page": "Page {current} of {total}",
    "list.total": "{total} results",
    "list.all": "All",
    "list.any": "Any",
    "list.yes": "Yes",
    "list.no": "No",

    # Pages management
    "pages.delete_confirm": "Are you sure you want to delete this page?",
    "pages.deleted": "Page deleted",
    "pages.delete_failed": "Failed to delete page",

    # Login
    "login.title": "Sign in",
    "login.email": "Email",
    "login.password": "Password",
}
