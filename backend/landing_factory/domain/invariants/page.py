from landing_factory.domain.exceptions import InvariantViolation


def assert_version_sequence(versions):
    numbers = sorted(v.version_number for v in versions)
    expected = list(range(1, len(numbers) + 1))

    if numbers != expected:
        raise InvariantViolation(
            f"Page version numbers are not consecutive starting from 1: {numbers}"
        )


def assert_single_published(versions):
    published = [v.version_number for v in versions if v.is_published]

    if len(published) > 1:
        raise InvariantViolation(
            f"More than one published version for page: {published}"
        )


def assert_page_versions(page):
    assert_version_sequence(page.versions)
    assert_single_published(page.versions)
