"""
Alert headers for the client-side notifier.

The front end reads `X-{app}-alert` / `X-{app}-error` to show a toast and
`X-{app}-params` as the translation parameter. With translation enabled the
alert carries a message key such as `blogApp.blog.created`; without it, a
plain English sentence.
"""

from urllib.parse import quote


def create_alert(application_name: str, message: str, param: str) -> dict[str, str]:
    """
    Build the alert header pair.

    Args:
        application_name: Client application name used in header names.
        message: Alert message or translation key.
        param: Parameter for the message, URL-encoded.

    Returns:
        dict[str, str]: Headers to merge into the response.
    """
    return {
        f"X-{application_name}-alert": message,
        f"X-{application_name}-params": quote(param, safe=""),
    }


def create_entity_creation_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    param: str,
) -> dict[str, str]:
    message = (
        f"{application_name}.{entity_name}.created"
        if enable_translation
        else f"A new {entity_name} is created with identifier {param}"
    )
    return create_alert(application_name, message, param)


def create_entity_update_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    param: str,
) -> dict[str, str]:
    message = (
        f"{application_name}.{entity_name}.updated"
        if enable_translation
        else f"A {entity_name} is updated with identifier {param}"
    )
    return create_alert(application_name, message, param)


def create_entity_deletion_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    param: str,
) -> dict[str, str]:
    message = (
        f"{application_name}.{entity_name}.deleted"
        if enable_translation
        else f"A {entity_name} is deleted with identifier {param}"
    )
    return create_alert(application_name, message, param)


def create_failure_alert(
    application_name: str,
    enable_translation: bool,
    entity_name: str,
    error_key: str,
    default_message: str,
) -> dict[str, str]:
    """
    Build the error header pair attached to a rejected request.

    Args:
        application_name: Client application name used in header names.
        enable_translation: Emit `error.<key>` instead of the default message.
        entity_name: Entity the failure refers to.
        error_key: Machine-readable reason code.
        default_message: Human-readable fallback.

    Returns:
        dict[str, str]: Headers to merge into the response.
    """
    message = f"error.{error_key}" if enable_translation else default_message
    return {
        f"X-{application_name}-error": message,
        f"X-{application_name}-params": entity_name,
    }
