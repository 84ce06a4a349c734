from __future__ import annotations

from ats_scanner.schemas.resume import ResumeData, SectionItem


def _item_parts(item: SectionItem, *, include_date: bool) -> list[str | None]:
    parts = [item.title, item.subtitle, item.description]
    if include_date:
        parts.append(item.date)
    return parts


def resume_data_to_text(resume: ResumeData) -> str:
    """Flatten a structured resume into one space-joined string for scanning."""
    info = resume.personal_info
    parts: list[str | None] = [
        info.full_name,
        info.job_title,
        info.email,
        info.phone,
        info.location,
        info.linkedin,
        info.website,
        info.summary,
    ]

    for section in resume.sections:
        if not section.is_visible:
            continue
        for item in section.items:
            parts.extend(_item_parts(item, include_date=True))

    for project in resume.projects:
        parts.extend([project.title, project.role, project.company, project.description])

    for cert in resume.certifications:
        parts.extend([cert.name, cert.issuer])

    for lang in resume.languages:
        parts.extend([lang.language, lang.proficiency])

    for custom in resume.custom_sections:
        for item in custom.items:
            parts.extend(_item_parts(item, include_date=False))

    return " ".join(part for part in parts if part)
