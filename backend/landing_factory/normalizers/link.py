def normalize_link(link):
    return {
        "id": link.id,
        "name": link.name,
        "targetUrl": link.target_url,
        "linkKind": link.link_kind,
    }


def normalize_assignment(assignment):
    return {
        "id": assignment.id,
        "siteId": assignment.site_id,
        "placement": assignment.placement,
        "linkLibraryId": assignment.link_library_id,
        "link": normalize_link(assignment.link_library) if assignment.link_library else None,
        "isEnabled": assignment.is_enabled,
        "displayTextOverride": assignment.display_text_override,
    }
