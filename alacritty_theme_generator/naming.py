from .randomness import random_int

ADJECTIVES = (
    "crimson", "azure", "emerald", "golden", "violet", "scarlet", "amber", "indigo",
    "silver", "copper", "jade", "ruby", "sapphire", "pearl", "coral", "ivory",
    "obsidian", "marble", "crystal", "diamond", "onyx", "garnet", "topaz", "opal",
    "mystic", "cosmic", "ethereal", "stellar", "lunar", "solar", "nova", "nebula",
    "electric", "neon", "plasma", "matrix", "cyber", "digital", "quantum", "atomic",
    "velvet", "silk", "satin", "linen", "cotton", "cashmere", "wool", "mohair",
    "frost", "shadow", "ember", "flame", "spark", "glow", "shimmer", "glitter",
    "deep", "bright", "dark", "light", "soft", "bold", "vivid", "muted",
)  # fmt: skip

NOUNS = (
    "tiger", "wolf", "eagle", "dragon", "phoenix", "raven", "hawk", "falcon",
    "mountain", "ocean", "forest", "desert", "valley", "river", "lake", "canyon",
    "storm", "thunder", "lightning", "tempest", "hurricane", "tornado", "blizzard", "rain",
    "sunset", "sunrise", "twilight", "dawn", "dusk", "midnight", "noon", "morning",
    "galaxy", "comet", "meteor", "planet", "star", "moon", "sun", "cosmos",
    "crystal", "diamond", "emerald", "sapphire", "ruby", "pearl", "opal", "jade",
    "warrior", "knight", "guardian", "sentinel", "defender", "champion", "hero", "legend",
    "whisper", "echo", "shadow", "dream", "vision", "phantom", "spirit", "ghost",
    "blade", "arrow", "shield", "crown", "throne", "tower", "castle", "fortress",
)  # fmt: skip


def generate_random_name(prefix, source=None):
    """Build a theme name like ``warm_golden_falcon``."""
    adjective = ADJECTIVES[random_int(len(ADJECTIVES), source)]
    noun = NOUNS[random_int(len(NOUNS), source)]
    return f"{prefix}_{adjective}_{noun}"


def variant_prefix(scheme, dark=False, light=False):
    if dark:
        return f"{scheme}_dark"
    if light:
        return f"{scheme}_light"
    return scheme
