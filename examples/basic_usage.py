#!/usr/bin/env python3
"""
Basic degreeaudit Usage Example

This example demonstrates the core workflow:
1. Parse an audit PDF into an AcademicEvaluation
2. Inspect identity, credits and outstanding courses
3. Use a custom course catalog
4. Save and load the latest evaluation
"""

from pathlib import Path

from degreeaudit import EvaluationStore, ParserConfig, parse_batch, parse_document, parse_text


def main():
    # ─────────────────────────────────────────────────────────────────────────
    # 1. Basic Parsing
    # ─────────────────────────────────────────────────────────────────────────

    result = parse_document("path/to/audit.pdf")
    if not result.success:
        print(f"Could not read audit: {result.error}")
        return

    evaluation = result.data
    print(f"Student: {evaluation.student_name} ({evaluation.student_id})")
    print(f"  Program: {evaluation.degree_program}")
    print(f"  GPA: {evaluation.gpa}")
    print(
        f"  Credits: {evaluation.credits_completed} of {evaluation.total_credits_required}"
        f" ({evaluation.credits_remaining} remaining)"
    )

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Outstanding Courses
    # ─────────────────────────────────────────────────────────────────────────

    # Ordered by credits (highest first), then course code
    for course in evaluation.required_courses:
        print(
            f"  {course.course_code:<10} {course.credits}  "
            f"{course.course_title} [{course.category}]"
        )

    # What happened along the way
    for line in result.processing_log:
        print(f"  log: {line}")

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Custom Configuration
    # ─────────────────────────────────────────────────────────────────────────

    config = ParserConfig(
        lookup_path=Path("catalogs/2026.yaml"),  # Your own titles and categories
        default_category="General Elective",  # Subjects missing from the catalog
        on_extraction_error="raise",  # Raise instead of returning success=False
    )
    result = parse_document("path/to/audit.pdf", config=config)

    # Text already extracted elsewhere
    evaluation = parse_text("Credits required: 120 Credits applied: 55")
    print(f"Remaining: {evaluation.credits_remaining}")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Persistence
    # ─────────────────────────────────────────────────────────────────────────

    store = EvaluationStore(Path("~/.degreeaudit/store.json").expanduser())
    store.save(evaluation, "audit.pdf")

    stored = store.load()
    if stored is not None:
        print(f"Loaded {stored.file_name}, uploaded {stored.uploaded_at:%Y-%m-%d %H:%M}")


def batch_example():
    """Parse every audit in a directory."""
    pdfs = sorted(Path("audits/").glob("*.pdf"))

    for path, result in parse_batch(pdfs):
        if isinstance(result, Exception):
            print(f"{path.name}: FAILED ({result})")
        elif result.success:
            print(f"{path.name}: {len(result.data.required_courses)} courses still needed")
        else:
            print(f"{path.name}: unreadable ({result.error})")


if __name__ == "__main__":
    # Note: These examples use placeholder paths.
    # Replace with actual PDF paths to run.
    print("degreeaudit Usage Examples")
    print("=" * 50)
    print("\nSee the code for detailed examples of:")
    print("  - Parsing an audit PDF")
    print("  - Outstanding courses and processing log")
    print("  - Custom configuration and catalogs")
    print("  - Persistence")
    print("  - Batch processing")
