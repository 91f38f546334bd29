# Role: Central enum of message categories the assistant distinguishes. Shared by the classification prompt,
# the classifier's parser and the per-category reply prompts.

from enum import Enum


class MessageCategory(str, Enum):
    QUESTION = "question"
    GREETING = "greeting"
    GRATITUDE = "gratitude"
    KNOWLEDGE = "knowledge"
    EMOTION = "emotion"
    COMMAND = "command"
    GENERAL = "general"
