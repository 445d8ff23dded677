"""
Fetch the NLTK resources used for noun-phrase chunking and entity hints.

Usage:
    cd backend
    python download_nltk_data.py

Scoring works without them; phrase candidates then come only from word
pairs and entity hints stay empty.
"""

import sys

import nltk

# Older and newer NLTK releases name the tagger and chunker data differently
NLTK_RESOURCES = (
    "averaged_perceptron_tagger",
    "averaged_perceptron_tagger_eng",
    "maxent_ne_chunker",
    "maxent_ne_chunker_tab",
    "words",
)


def ensure_nltk_data() -> bool:
    """Download NLTK tagger and chunker data if not present."""
    ok = True
    for resource in NLTK_RESOURCES:
        if nltk.download(resource, quiet=True):
            print(f"[OK] {resource}")
        else:
            print(f"[WARN] could not download {resource}")
            ok = False
    return ok


if __name__ == "__main__":
    print("=" * 60)
    print("  ATS Resume Scorer - NLTK data")
    print("=" * 60)
    sys.exit(0 if ensure_nltk_data() else 1)
