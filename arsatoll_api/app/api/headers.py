"""
Alert headers attached to CRUD responses.

Clients display the ``X-<app>-alert`` message and use the
``X-<app>-params`` value (an identifier or an entity name) to build
links.  Failures carry an ``X-<app>-error`` key instead of an alert.
"""

from typing import Dict


def create_alert(app_name: str, message: str, param: str) -> Dict[str, str]:
    return {
        f"X-{app_name}-alert": message,
        f"X-{app_name}-params": param,
    }


def entity_creation_alert(app_name: str, entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(app_name, f"A new {entity_name} is created with identifier {param}", param)


def entity_update_alert(app_name: str, entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(app_name, f"A {entity_name} is updated with identifier {param}", param)


def entity_deletion_alert(app_name: str, entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(app_name, f"A {entity_name} is deleted with identifier {param}", param)


def failure_alert(app_name: str, entity_name: str, error_key: str) -> Dict[str, str]:
    return {
        f"X-{app_name}-error": f"error.{error_key}",
        f"X-{app_name}-params": entity_name,
    }
