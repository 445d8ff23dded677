"""Keyword extraction and comparison for resumes and job descriptions.

Combines single-document TF-IDF term ranking, whole-word matching against
the static skill and action-verb dictionaries, lightweight NLTK chunking
for noun phrases and entity hints, and a permissive keyword comparator.
"""

import logging
import re
import threading

import numpy as np
from nltk.chunk import RegexpParser, ne_chunk
from nltk.tokenize import wordpunct_tokenize
from sklearn.feature_extraction.text import TfidfVectorizer

from models.schemas.keyword_set import (
    ActionVerbRecord,
    ComparisonResult,
    EntityHint,
    KeywordMetadata,
    KeywordSet,
    SkillRecord,
)
from services.skill_dictionary import ACTION_VERBS, STOP_WORDS, iter_skills
from services.text_utils import normalize_text

logger = logging.getLogger(__name__)

MAX_TFIDF_KEYWORDS = 50
MAX_PHRASES = 30
MAX_ENTITIES = 20

# Tokens of three or more word characters; shorter tokens are never keywords
_TFIDF_TOKEN_PATTERN = r"(?u)\b\w\w\w+\b"

# Whole-word matching that still works for "c++", "c#", ".net" and "node.js".
# "java" must not match inside "javascript", "go" not inside "google".
_SKILL_PATTERNS: tuple[tuple[str, str, re.Pattern], ...] = tuple(
    (skill, category, re.compile(rf"(?<![a-z0-9.#]){re.escape(skill)}(?![a-z0-9])"))
    for skill, category in iter_skills()
)

_VERB_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (verb, re.compile(rf"\b{verb}\b")) for verb in ACTION_VERBS
)

_WORD_PAIR_RE = re.compile(r"\b([a-z]+\s+[a-z]+)\b")

_NOUN_PHRASE_GRAMMAR = RegexpParser("NP: {<JJ.*|VBG>*<NN.*>+}")

_ENTITY_TYPES: dict[str, str] = {
    "ORGANIZATION": "organization",
    "GPE": "place",
    "LOCATION": "place",
    "FACILITY": "place",
}

# Lazy-loaded NLTK tagger. Stays None when the tagger data is not installed,
# in which case noun-phrase chunks and entity hints come back empty.
_tagger = None
_tagger_unavailable = False
_tagger_lock = threading.Lock()
_ne_chunker_unavailable = False


def _get_tagger():
    """Load the NLTK perceptron POS tagger on first use."""
    global _tagger, _tagger_unavailable
    if _tagger is not None or _tagger_unavailable:
        return _tagger
    with _tagger_lock:
        if _tagger is None and not _tagger_unavailable:
            try:
                from nltk.tag.perceptron import PerceptronTagger

                _tagger = PerceptronTagger()
                logger.info("NLTK POS tagger loaded")
            except LookupError as e:
                _tagger_unavailable = True
                logger.warning("NLTK tagger data missing, phrase chunking disabled: %s", e)
    return _tagger


def _tag(text: str) -> list[tuple[str, str]]:
    tagger = _get_tagger()
    if tagger is None:
        return []
    tokens = wordpunct_tokenize(text)
    if not tokens:
        return []
    return tagger.tag(tokens)


def _ne_tree(tagged: list[tuple[str, str]]):
    """Run the NLTK named-entity chunker, or return None if its data is missing."""
    global _ne_chunker_unavailable
    if _ne_chunker_unavailable:
        return None
    try:
        return ne_chunk(tagged)
    except LookupError as e:
        _ne_chunker_unavailable = True
        logger.warning("NLTK NE chunker data missing, entity hints disabled: %s", e)
        return None


def _first_word_is_stop_word(phrase: str) -> bool:
    return phrase.split(" ", 1)[0] in STOP_WORDS


def extract_tfidf_keywords(text: str, top_n: int = MAX_TFIDF_KEYWORDS) -> list[str]:
    """Rank the terms of a single document by TF-IDF weight.

    With one document every term shares the same IDF, so the ranking is by
    term frequency; ties are broken alphabetically so results are stable.
    """
    if not text.strip():
        return []

    vectorizer = TfidfVectorizer(
        stop_words=sorted(STOP_WORDS),
        token_pattern=_TFIDF_TOKEN_PATTERN,
    )
    try:
        tfidf_matrix = vectorizer.fit_transform([text])
    except ValueError:
        # Empty vocabulary: only stop words or short tokens
        return []

    feature_names = vectorizer.get_feature_names_out()
    scores = tfidf_matrix[0].toarray().flatten()
    # Feature names are already alphabetical, so a stable sort keeps ties in order
    top_indices = np.argsort(-scores, kind="stable")[:top_n]
    return [str(feature_names[i]) for i in top_indices if scores[i] > 0]


def extract_skills(text: str) -> list[SkillRecord]:
    """Find dictionary skills in text, most frequently mentioned first."""
    text_lower = normalize_text(text)
    found: list[SkillRecord] = []
    for skill, category, pattern in _SKILL_PATTERNS:
        count = len(pattern.findall(text_lower))
        if count:
            found.append(SkillRecord(skill=skill, category=category, count=count))
    return sorted(found, key=lambda s: s.count, reverse=True)


def extract_action_verbs(text: str) -> list[ActionVerbRecord]:
    """Find action verbs in text, most frequently used first."""
    text_lower = normalize_text(text)
    found: list[ActionVerbRecord] = []
    for verb, pattern in _VERB_PATTERNS:
        count = len(pattern.findall(text_lower))
        if count:
            found.append(ActionVerbRecord(verb=verb, count=count))
    return sorted(found, key=lambda v: v.count, reverse=True)


def extract_phrases(text: str) -> list[str]:
    """Collect multi-word phrase candidates.

    Noun-phrase chunks from the POS tagger come first, then adjacent word
    pairs. Candidates must have two or more words, be longer than five
    characters and not open with a stop word.
    """
    phrases: dict[str, None] = {}

    tagged = _tag(text)
    if tagged:
        tree = _NOUN_PHRASE_GRAMMAR.parse(tagged)
        for subtree in tree.subtrees(filter=lambda t: t.label() == "NP"):
            phrase = " ".join(word for word, _ in subtree.leaves()).lower()
            if len(phrase.split()) >= 2 and len(phrase) > 5 and not _first_word_is_stop_word(phrase):
                phrases[phrase] = None

    for match in _WORD_PAIR_RE.finditer(text.lower()):
        phrase = re.sub(r"\s+", " ", match.group(1))
        if not _first_word_is_stop_word(phrase) and len(phrase) > 5:
            phrases[phrase] = None

    return list(phrases)[:MAX_PHRASES]


def extract_entities(text: str) -> list[EntityHint]:
    """Collect organization-like and place-like spans as entity hints."""
    tagged = _tag(text)
    if not tagged:
        return []
    tree = _ne_tree(tagged)
    if tree is None:
        return []

    entities: list[EntityHint] = []
    for subtree in tree:
        if not hasattr(subtree, "label"):
            continue
        entity_type = _ENTITY_TYPES.get(subtree.label())
        if entity_type is None:
            continue
        value = " ".join(word for word, _ in subtree.leaves())
        if len(value) > 2:
            entities.append(EntityHint(type=entity_type, value=value))
    return entities[:MAX_ENTITIES]


def extract_keywords(text: str) -> KeywordSet:
    """Extract every keyword signal from a resume or job description.

    Never raises: empty or whitespace-only text yields an empty KeywordSet.
    """
    if not text or not text.strip():
        return KeywordSet()

    tfidf_keywords = extract_tfidf_keywords(text)
    skills = extract_skills(text)
    action_verbs = extract_action_verbs(text)
    phrases = extract_phrases(text)
    entities = extract_entities(text)

    keywords = list(dict.fromkeys(tfidf_keywords + [s.skill for s in skills] + phrases))

    return KeywordSet(
        keywords=keywords,
        skills=skills,
        action_verbs=action_verbs,
        phrases=phrases,
        entities=entities,
        metadata=KeywordMetadata(
            total_keywords=len(keywords),
            skills_count=len(skills),
            action_verbs_count=len(action_verbs),
        ),
    )


def compare_keywords(
    resume_keywords: list[str], job_keywords: list[str]
) -> ComparisonResult:
    """Split job keywords into matched and missing against the resume keywords.

    A job keyword matches on case-insensitive equality, or failing that when
    it contains or is contained by any resume keyword ("manage" matches
    "management"). The substring fallback is deliberately permissive.
    """
    resume_set = {k.lower() for k in resume_keywords if k.strip()}

    matched: list[str] = []
    missing: list[str] = []
    for keyword in job_keywords:
        lower_keyword = keyword.lower()
        if lower_keyword in resume_set or any(
            lower_keyword in resume_kw or resume_kw in lower_keyword
            for resume_kw in resume_set
        ):
            matched.append(keyword)
        else:
            missing.append(keyword)

    total = len(job_keywords)
    return ComparisonResult(
        matched=matched,
        missing=missing,
        match_rate=(len(matched) / total) * 100 if total else 0.0,
        matched_count=len(matched),
        missing_count=len(missing),
        total_job_keywords=total,
    )
