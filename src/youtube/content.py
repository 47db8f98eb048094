"""Template generators for video titles, tags and script outlines."""

import re
from datetime import date

TITLE_STYLES = ("how-to", "listicle", "review")
SCRIPT_STYLES = ("educational", "entertainment", "review")


def generate_titles(topic: str, style: str, year: int | None = None) -> list[str]:
    """Five title ideas for a topic; unknown styles give no titles."""
    year = year or date.today().year
    templates = {
        "how-to": [
            f"How to {topic} (Complete Guide {year})",
            f"{topic} Tutorial for Beginners",
            f"Step by Step: {topic} Made Easy",
            f"Master {topic} in Under 10 Minutes",
            f"The Ultimate Guide to {topic}",
        ],
        "listicle": [
            f"Top 10 {topic} Tips You Need to Know",
            f"5 {topic} Secrets Experts Won't Tell You",
            f"7 Mind-Blowing {topic} Hacks",
            f"3 Common {topic} Mistakes (And How to Fix Them)",
            f"{topic}: 8 Things You're Doing Wrong",
        ],
        "review": [
            f"{topic} Review: The Truth Revealed",
            f"Is {topic} Worth It? Honest Review",
            f"{topic} vs Competition: Ultimate Comparison",
            f"{topic} in {year}: Still Worth It?",
            f"The TRUTH About {topic} (Not Sponsored)",
        ],
    }
    return templates.get(style, [])


def generate_tags(topic: str, year: int | None = None) -> list[str]:
    year = year or date.today().year
    base = re.sub(r"[^\w\s]", "", topic.lower())
    return [
        base,
        f"{base} tutorial",
        f"{base} guide",
        f"{base} {year}",
        f"how to {base}",
        f"{base} tips",
        f"{base} for beginners",
        f"learn {base}",
        f"{base} explained",
        f"best {base}",
        f"{base} basics",
        f"{base} course",
        f"{base} tutorial step by step",
        f"{base} masterclass",
        f"{base} tips and tricks",
    ]


def _minutes(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def generate_script(topic: str, style: str, duration_minutes: float = 5) -> str:
    """Section outline for a video; unknown styles give an empty string."""
    if style == "educational":
        return (
            "[Intro - 30 seconds]\n"
            f'• Hook: "Have you ever wondered about {topic}?"\n'
            "• Quick overview of what viewers will learn\n"
            "• Channel branding\n"
            "\n"
            f"[Main Content - {_minutes(duration_minutes - 1)} minutes]\n"
            f"• Point 1: Introduction to {topic}\n"
            "• Point 2: Key concepts explained\n"
            "• Point 3: Step-by-step breakdown\n"
            "• Point 4: Common misconceptions\n"
            "• Point 5: Pro tips and tricks\n"
            "\n"
            "[Conclusion - 30 seconds]\n"
            "• Recap key points\n"
            "• Call to action\n"
            "• Subscribe reminder"
        )
    if style == "entertainment":
        return (
            "[Hook - 20 seconds]\n"
            f"• Attention-grabbing opener about {topic}\n"
            "• Teaser of the best moment\n"
            "\n"
            f"[Content - {_minutes(duration_minutes - 0.5)} minutes]\n"
            "• Story setup\n"
            "• Building suspense\n"
            "• Main event/revelation\n"
            "• Reaction and commentary\n"
            "• Behind the scenes\n"
            "\n"
            "[Outro - 30 seconds]\n"
            "• Wrap-up thoughts\n"
            "• Social media callouts\n"
            "• Subscribe reminder"
        )
    if style == "review":
        return (
            "[Introduction - 30 seconds]\n"
            f"• Quick {topic} overview\n"
            "• Why this review matters\n"
            "• Disclosure statement\n"
            "\n"
            f"[Review - {_minutes(duration_minutes - 1)} minutes]\n"
            "• First impressions\n"
            "• Key features\n"
            "• Pros and cons\n"
            "• Performance tests\n"
            "• Price analysis\n"
            "• Comparisons\n"
            "\n"
            "[Verdict - 30 seconds]\n"
            "• Final rating\n"
            "• Recommendations\n"
            "• Like and subscribe reminder"
        )
    return ""
