# -*- coding: utf-8 -*-
"""
First-run setup configuration model.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from models.record import Record

EMAIL_PROVIDERS = ("smtp", "sendgrid", "ses")

# Keys of the check-requirements report that are informational only
REQUIREMENT_VERSION_KEYS = ("nodeVersion", "nextjsVersion", "prismaVersion")
# Database reachability is proven by the connection test, not by this report
REQUIREMENT_IGNORED_KEYS = ("database",)


def failed_requirements(report: Dict[str, Any]) -> list:
    """Names of checks the server reported as false."""
    return [
        name for name, value in (report or {}).items()
        if name not in REQUIREMENT_VERSION_KEYS
        and name not in REQUIREMENT_IGNORED_KEYS
        and value is False
    ]


@dataclass
class SetupConfig(Record):
    """
    Everything the setup wizard collects, flattened per section.

    The API payload is nested per section: database, admin, site, email,
    payment, security.
    """

    database_url: str = ""
    database_tested: bool = False

    admin_email: str = ""
    admin_password: str = ""
    admin_confirm_password: str = ""
    admin_first_name: str = ""
    admin_last_name: str = ""

    site_name: str = "BnOverseas"
    site_description: str = ""
    site_logo: str = ""
    site_contact_email: str = ""
    site_contact_phone: str = ""
    site_address: str = ""

    email_provider: str = "smtp"
    email_host: str = ""
    email_port: str = "587"
    email_username: str = ""
    email_password: str = ""

    payment_razorpay_key_id: str = ""
    payment_razorpay_key_secret: str = ""
    payment_stripe_public_key: str = ""
    payment_stripe_secret_key: str = ""

    security_jwt_secret: str = ""
    security_encryption_key: str = ""
    security_enable_two_factor: bool = False
    security_session_timeout: int = 24

    system_check: Dict[str, Any] = field(default_factory=dict)

    @property
    def passwords_match(self) -> bool:
        return self.admin_password == self.admin_confirm_password

    def to_api_payload(self) -> Dict[str, Any]:
        return {
            "database": {
                "url": self.database_url.strip(),
                "testConnection": bool(self.database_tested),
            },
            "admin": {
                "email": self.admin_email.strip(),
                "password": self.admin_password,
                "firstName": self.admin_first_name.strip(),
                "lastName": self.admin_last_name.strip(),
            },
            "site": {
                "name": self.site_name.strip(),
                "description": self.site_description,
                "logo": self.site_logo,
                "contactEmail": self.site_contact_email.strip(),
                "contactPhone": self.site_contact_phone,
                "address": self.site_address,
            },
            "email": {
                "provider": self.email_provider,
                "host": self.email_host,
                "port": str(self.email_port or ""),
                "username": self.email_username,
                "password": self.email_password,
            },
            "payment": {
                "razorpayKeyId": self.payment_razorpay_key_id,
                "razorpayKeySecret": self.payment_razorpay_key_secret,
                "stripePublicKey": self.payment_stripe_public_key,
                "stripeSecretKey": self.payment_stripe_secret_key,
            },
            "security": {
                "jwtSecret": self.security_jwt_secret,
                "encryptionKey": self.security_encryption_key,
                "enableTwoFactor": bool(self.security_enable_two_factor),
                "sessionTimeout": int(self.security_session_timeout or 24),
            },
        }
