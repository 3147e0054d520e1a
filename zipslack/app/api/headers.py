"""Alert headers attached to resource responses.

Clients show ``X-<app>-alert`` as a toast and read the affected identifier
(or, for errors, the entity name) from ``X-<app>-params``.
"""

from zipslack.app.config import settings


def _alert(message: str, param: str) -> dict[str, str]:
    return {
        f"X-{settings.app_name}-alert": message,
        f"X-{settings.app_name}-params": param,
    }


def entity_creation_alert(entity_name: str, entity_id: object) -> dict[str, str]:
    return _alert(f"A new {entity_name} is created with identifier {entity_id}", str(entity_id))


def entity_update_alert(entity_name: str, entity_id: object) -> dict[str, str]:
    return _alert(f"A {entity_name} is updated with identifier {entity_id}", str(entity_id))


def entity_deletion_alert(entity_name: str, entity_id: object) -> dict[str, str]:
    return _alert(f"A {entity_name} is deleted with identifier {entity_id}", str(entity_id))


def failure_alert(entity_name: str, error_key: str) -> dict[str, str]:
    return {
        f"X-{settings.app_name}-error": f"error.{error_key}",
        f"X-{settings.app_name}-params": entity_name,
    }
