from clipdir.content.base import ContentClassifier
from clipdir.content.factory import get_classifier_class, get_classifier

__all__ = [
    'ContentClassifier',
    'get_classifier_class',
    'get_classifier',
]
