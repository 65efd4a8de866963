from .common import iso


def normalize_domain(domain):
    return {
        "id": domain.id,
        "domainName": domain.domain_name,
        "status": domain.status,
        "createdAt": iso(domain.created_at),
    }


def normalize_template(template):
    return {
        "id": template.id,
        "key": template.key,
        "name": template.name,
        "siteType": template.site_type,
        "version": template.version,
        "definitionJson": template.definition_json or {},
        "isActive": template.is_active,
    }


def normalize_page(page, include_versions=False):
    data = {
        "id": page.id,
        "route": page.route,
        "pageType": page.page_type,
        "status": page.status,
        "slug": page.slug,
        "createdAt": iso(page.created_at),
    }

    if include_versions:
        data["versions"] = [
            {
                "id": v.id,
                "versionNumber": v.version_number,
                "isPublished": v.is_published,
                "createdAt": iso(v.created_at),
            }
            for v in page.versions
        ]

    return data


def normalize_site(site, include_pages=False):
    data = {
        "id": site.id,
        "domainId": site.domain_id,
        "domain": normalize_domain(site.domain) if site.domain else None,
        "templateId": site.template_id,
        "themePresetId": site.theme_preset_id,
        "componentStylePresetId": site.component_style_preset_id,
        "analyticsProfileId": site.analytics_profile_id,
        "theme": site.theme,
        "language": site.language,
        "status": site.status,
        "createdAt": iso(site.created_at),
    }

    if include_pages:
        data["pages"] = [normalize_page(p, include_versions=True) for p in site.pages]

    return data
