def normalize_preset(preset):
    """Theme and component style presets share one shape."""
    return {
        "id": preset.id,
        "name": preset.name,
        "json": preset.json or {},
        "isSystem": preset.is_system,
    }


def normalize_analytics_profile(profile):
    return {
        "id": profile.id,
        "name": profile.name,
        "scriptsJson": profile.scripts_json or {},
        "verificationJson": profile.verification_json or {},
        "isSystem": profile.is_system,
    }
