from typing import Any, Dict

from flask import current_app

from landing_factory.domain.exceptions import ValidationError
from landing_factory.models.bulk_operation import BulkOperation
from landing_factory.models.presets import ComponentStylePreset, ThemePreset
from landing_factory.utils.transaction import transactional

MANUAL_IMPORT_TYPE = "design.manual_import"


def _require_name(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{key} is required")
    return value.strip()


def _require_object(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if not isinstance(value, dict):
        raise ValidationError(f"{key} must be an object")
    return value


def import_manual_design(*, session, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Create a theme preset and a component style preset in one step.

    The import is recorded as a ``design.manual_import`` operation whose
    result points at both new presets. Either everything is stored or nothing.
    """
    theme_name = _require_name(data, "themeName")
    theme_json = _require_object(data, "themeJson")
    preset_name = _require_name(data, "presetName")
    preset_json = _require_object(data, "presetJson")

    with transactional(session):
        theme = ThemePreset()
        theme.name = theme_name
        theme.json = theme_json

        preset = ComponentStylePreset()
        preset.name = preset_name
        preset.json = preset_json

        session.add_all([theme, preset])
        session.flush()

        job = BulkOperation()
        job.type = MANUAL_IMPORT_TYPE
        job.status = "success"
        job.input_json = {"themeName": theme_name, "presetName": preset_name}
        job.result_json = {"themePresetId": theme.id, "componentStylePresetId": preset.id}
        session.add(job)

    current_app.logger.info(
        "Manual design import %s: theme %s, component preset %s", job.id, theme.id, preset.id
    )
    return {"jobId": job.id, "themePresetId": theme.id, "componentStylePresetId": preset.id}
