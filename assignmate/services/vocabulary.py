"""Word lists shared by the analyzers and the humanizer.

Bump ``STOPLIST_VERSION`` whenever one of the sets below changes, since the
favorite-word ranking and the typo filter both depend on them.
"""

STOPLIST_VERSION = "2"

# Frequent words never reported as a writer's favorite words.
FREQUENT_WORDS = frozenset(
    {
        "the", "and", "that", "have", "for", "not", "with", "you", "this", "but",
        "his", "from", "they", "she", "will", "would", "there", "their", "what",
        "about", "which", "when", "make", "like", "time", "just", "know", "take",
        "into", "year", "your", "some", "could", "them", "than", "then", "look",
        "only", "come", "over", "think", "also", "back", "after", "work", "first",
        "well", "even", "want", "because", "these", "give", "most",
    }
)

# Words the typo generator leaves alone; overlaps FREQUENT_WORDS.
TYPO_EXEMPT_WORDS = frozenset(
    {
        "the", "and", "that", "have", "for", "not", "with", "you", "this", "but",
        "his", "from", "they", "say", "her", "she", "will", "one", "all", "would",
        "there", "their", "what", "out", "about", "who", "get", "which", "when", "make",
        "can", "like", "time", "just", "him", "know", "take", "people", "into", "year",
        "your", "good", "some", "could", "them", "see", "other", "than", "then", "now",
        "look", "only", "come", "its", "over", "think", "also", "back", "after", "use",
        "two", "how", "our", "work", "first", "well", "way", "even", "new", "want",
        "because", "these", "give", "most", "important", "however", "through", "being",
        "therefore", "although", "something", "anything", "everything", "nothing",
        "sometimes", "always", "never", "usually", "often", "rarely",
    }
)

# Capitalized words that are not key terms in course materials.
CAPITALIZED_STOPWORDS = frozenset({"I", "The", "A", "An", "In", "On", "At", "To", "For", "With", "By"})

TRANSITION_WORDS = (
    "however", "therefore", "moreover", "consequently", "furthermore",
    "nevertheless", "indeed", "meanwhile", "nonetheless", "thus",
    "also", "besides", "then", "additionally", "finally", "subsequently",
)

INSTRUCTION_VERBS = (
    "analyze", "argue", "compare", "contrast", "define", "describe",
    "discuss", "evaluate", "examine", "explain", "illustrate", "interpret",
    "justify", "outline", "review", "summarize", "trace",
)
