from typing import Type

from clipdir.content.base import ContentClassifier


def get_classifier_class() -> Type[ContentClassifier]:
    from clipdir.content.sniffing import MagicByteClassifier
    return MagicByteClassifier


def get_classifier() -> ContentClassifier:
    classifier_class = get_classifier_class()
    return classifier_class()
