"""Built-in demo bank written on first access to an empty store."""

from typing import List

from .models.question import Question

DEMO_QUESTIONS: List[Question] = [
    Question(
        id="demo-1",
        lesson="Lecture 1: Introduction",
        question="Which of the following best describes React?",
        options=(
            "A database",
            "A Java framework",
            "A JavaScript library for building user interfaces",
            "A CSS preprocessor",
        ),
        correct_answer_index=2,
        explanation=(
            "React is a declarative, efficient, and flexible JavaScript library "
            "for building user interfaces."
        ),
    ),
    Question(
        id="demo-2",
        lesson="Lecture 1: Introduction",
        question="What is the virtual DOM?",
        options=(
            "A direct copy of the HTML DOM",
            "A lightweight copy of the DOM kept in memory",
            "A browser extension",
            "A new HTML standard",
        ),
        correct_answer_index=1,
        explanation=(
            "The virtual DOM is a programming concept where an ideal, or 'virtual', "
            "representation of a UI is kept in memory and synced with the 'real' DOM."
        ),
    ),
    Question(
        id="demo-3",
        lesson="Lecture 2: Components",
        question="How do you pass data to a child component?",
        options=("Using State", "Using Props", "Using LocalStorage", "Using Windows"),
        correct_answer_index=1,
        explanation=(
            "Props (short for properties) are the mechanism to pass data from a "
            "parent component to a child component."
        ),
    ),
]
