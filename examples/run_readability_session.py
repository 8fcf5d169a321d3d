"""Minimal example showing how a host can run analyses while text is being typed."""

from __future__ import annotations

from character_counter import ReadabilitySession, analyze_text, format_duration


def main() -> None:
    drafts = [
        "The cat",
        "The cat sat on the mat.",
        "The cat sat on the mat. It was a good day and we all had a great time.",
    ]

    with ReadabilitySession(delay=0.2) as session:
        for draft in drafts:
            # Cheap stats are recomputed synchronously on every keystroke.
            analysis = analyze_text(draft)
            print(
                f"{analysis.stats.words} words, "
                f"reading time {format_duration(analysis.stats.reading_time_minutes)}"
            )
            session.submit(draft)
            print(f"readability state: {session.state}")

        # Only the last draft's result is published.
        result = session.wait()

    if result is not None:
        print(f"Readability: {result.readability_score}/100")
        print(f"Tone: {result.tone}, sentiment: {result.sentiment}")
        for suggestion in result.suggestions:
            print(f"- {suggestion}")


if __name__ == "__main__":
    main()
