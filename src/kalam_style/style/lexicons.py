"""
Word and Phrase Lists

Closed vocabularies the analyzers scan against. Order matters for the
presence-based lists: matches are reported in the order declared here.
"""

ACADEMIC_KEYWORDS = [
    "therefore", "however", "moreover", "furthermore", "consequently",
    "nevertheless", "empirical", "hypothesis", "methodology", "analysis",
    "framework", "paradigm", "theoretical", "substantial", "significant",
    "demonstrate", "establish", "investigate", "examine", "evaluate",
    "elucidate", "substantiate", "corroborate", "postulate", "extrapolate",
]

FORMAL_WORDS = [
    "utilize", "demonstrate", "facilitate", "implement", "establish",
    "enhance", "optimize", "constitute", "encompass", "exemplify",
    "ascertain", "endeavor", "procurement", "methodology", "subsequent",
]

CASUAL_WORDS = [
    "use", "show", "help", "do", "make", "improve", "better", "include",
    "like", "get", "want", "need", "think", "know", "see", "pretty",
    "really", "kind of", "sort of", "stuff", "things", "guy", "gonna",
]

TRANSITION_WORDS = [
    "however", "therefore", "consequently", "nevertheless", "furthermore",
    "moreover", "in addition", "on the other hand", "in contrast",
    "similarly", "likewise", "for instance", "for example", "in conclusion",
]

FILLER_PHRASES = [
    "in essence", "it should be noted", "for all intents and purposes",
    "at the end of the day", "needless to say", "to be honest",
    "you know", "i mean", "sort of", "kind of",
    "basically", "literally", "actually", "obviously", "clearly",
]

CONTRACTIONS = [
    "don't", "can't", "won't", "isn't", "aren't", "wasn't", "weren't",
    "haven't", "hasn't", "hadn't", "shouldn't", "couldn't", "wouldn't",
    "doesn't", "didn't", "it's", "that's", "there's", "here's", "what's",
    "who's", "where's", "you're", "we're", "they're", "i'm", "let's",
]

ABSTRACT_WORDS = [
    "concept", "idea", "theory", "principle", "notion", "essence",
    "significance", "implication", "philosophy", "value",
]

CONCRETE_WORDS = [
    "table", "house", "car", "book", "computer", "person", "data",
    "example", "chair", "tree", "water", "food",
]

POSITIVE_WORDS = ["excellent", "great", "wonderful", "fantastic", "amazing", "brilliant"]
NEGATIVE_WORDS = ["terrible", "awful", "horrible", "disappointing", "poor", "frustrating"]

CONCERN_WORDS = ["concern", "concerned", "concerns", "worry", "worried", "worries"]

DEDUCTIVE_MARKERS = ["therefore", "thus", "consequently", "hence", "it follows that"]
INDUCTIVE_MARKERS = ["for example", "for instance", "specifically", "in particular", "such as"]

COORDINATING_CONJUNCTIONS = ["and", "but", "or", "nor", "for", "yet", "so"]
SUBORDINATING_CONJUNCTIONS = [
    "because", "since", "while", "although", "whereas", "unless",
    "if", "when", "where", "that", "which",
]

# Adverbs that read as a tic when leaned on
INTENSIFIERS = ["very", "really", "quite", "rather"]

# US/UK spelling pairs; using both halves of a pair reads as inconsistency
SPELLING_VARIANTS = [
    ("color", "colour"),
    ("favor", "favour"),
    ("behavior", "behaviour"),
    ("center", "centre"),
    ("analyze", "analyse"),
    ("organize", "organise"),
    ("realize", "realise"),
]

# Easily confused word pairs flagged when both appear
CONFUSABLE_PAIRS = [
    ("its", "it's", "Inconsistent its/it's usage"),
    ("your", "you're", "Mixed your/you're usage"),
    ("their", "there", "Potential their/there confusion"),
    ("then", "than", "Possible then/than confusion"),
    ("affect", "effect", "Possible affect/effect confusion"),
]
