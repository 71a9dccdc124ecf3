"""Emotion labels produced by the analysis service."""

from typing import Literal, get_args

type EmotionLabel = Literal["joy", "anger", "sadness", "fear", "surprise", "love"]

# Display order used by per-category breakdowns.
EMOTION_LABELS: tuple[str, ...] = get_args(EmotionLabel.__value__)
