"""Rule-based financial assistant.

Replies come from an ordered rule table. Rules are evaluated top to bottom
against the lowercased message and the first match wins; when nothing
matches the fallback response is returned. Rule order is part of the
contract: e.g. "emergency savings" is answered by the saving rule because
it sits above the emergency-fund rule.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, Sequence, Tuple, Union

from .aggregation import aggregate, top_categories
from .models import Expense
from .record_store import mint_record_id

ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"

GREETING = "Hello! I'm your financial assistant. How can I help you today?"
FALLBACK_RESPONSE = (
    "I'm here to help with your financial questions. You can ask about your spending, "
    "budgeting tips, saving strategies, debt management, or investment advice."
)

SUGGESTED_QUESTIONS = [
    "What did I spend most on last month?",
    "What are some budgeting tips?",
    "How can I save more money?",
    "How should I invest my money?",
    "How can I manage my debt?",
    "How much should I have in my emergency fund?",
]


@dataclass(frozen=True)
class AssistantContext:
    """Ledger data the assistant may quote in its answers."""

    expenses: Tuple[Expense, ...] = ()


Response = Union[str, Callable[[Optional[AssistantContext]], str]]


@dataclass(frozen=True)
class AssistantRule:
    """Keyword rule: every ``all_of`` keyword and at least one ``any_of`` keyword must occur."""

    name: str
    response: Response
    any_of: Tuple[str, ...] = ()
    all_of: Tuple[str, ...] = ()
    whole_word: bool = False

    def _contains(self, text: str, keyword: str) -> bool:
        if self.whole_word:
            return re.search(r"\b" + re.escape(keyword) + r"\b", text) is not None
        return keyword in text

    def matches(self, message: str) -> bool:
        text = message.lower()
        if not all(self._contains(text, k) for k in self.all_of):
            return False
        if self.any_of and not any(self._contains(text, k) for k in self.any_of):
            return False
        return bool(self.any_of or self.all_of)

    def render(self, context: Optional[AssistantContext] = None) -> str:
        if callable(self.response):
            return self.response(context)
        return self.response


_CANNED_SPENDING = (
    "Based on your spending last month, your top three categories were: "
    "Food & Dining ($485), Rent ($1200), and Utilities ($420)."
)


def _spending_summary(context: Optional[AssistantContext]) -> str:
    if context is None or not context.expenses:
        return _CANNED_SPENDING
    top = top_categories(aggregate(context.expenses), limit=3)
    parts = [f"{name} (${amount.quantize(Decimal('0.01')):,})" for name, amount in top.items()]
    if len(parts) == 1:
        listing = parts[0]
    else:
        listing = ", ".join(parts[:-1]) + f", and {parts[-1]}"
    noun = "category was" if len(parts) == 1 else f"{len(parts)} categories were"
    return f"Based on your recent spending, your top {noun}: {listing}."


DEFAULT_RULES: Tuple[AssistantRule, ...] = (
    AssistantRule(
        name="greeting",
        any_of=("hello", "hi"),
        whole_word=True,
        response="Hello! How can I help with your finances today?",
    ),
    AssistantRule(
        name="last_month_spending",
        all_of=("spend", "last month"),
        response=_spending_summary,
    ),
    AssistantRule(
        name="budget_tips",
        all_of=("budget", "tips"),
        response=(
            "Here are some budgeting tips: 1) Follow the 50/30/20 rule - 50% on needs, 30% on wants, "
            "and 20% on savings. 2) Track all your expenses. 3) Set specific financial goals. "
            "4) Review your budget regularly and adjust as needed."
        ),
    ),
    AssistantRule(
        name="saving",
        any_of=("save", "saving"),
        response=(
            "To improve your savings, consider: 1) Automating your savings with direct deposit. "
            "2) Finding areas to cut back on expenses. 3) Using the 24-hour rule before making "
            "non-essential purchases. 4) Setting clear financial goals with deadlines."
        ),
    ),
    AssistantRule(
        name="investing",
        any_of=("invest", "investment"),
        response=(
            "For investments, consider: 1) Start with your employer's retirement plan. "
            "2) Build a diversified portfolio. 3) Consider low-cost index funds for beginners. "
            "4) Consult with a financial advisor for personalized advice."
        ),
    ),
    AssistantRule(
        name="debt",
        any_of=("debt", "loan"),
        response=(
            "To manage debt effectively: 1) Prioritize high-interest debt. 2) Consider debt "
            "consolidation. 3) Always pay more than the minimum payment. 4) Create a debt "
            "repayment plan with specific goals and timeline."
        ),
    ),
    AssistantRule(
        name="emergency_fund",
        any_of=("emergency fund", "emergency savings"),
        response=(
            "For emergency funds: 1) Aim to save 3-6 months of essential expenses. 2) Keep it in a "
            "high-yield savings account. 3) Only use it for true emergencies. 4) Replenish it as "
            "soon as possible after using it."
        ),
    ),
)


def match_rule(message: str, rules: Sequence[AssistantRule] = DEFAULT_RULES) -> Optional[AssistantRule]:
    for rule in rules:
        if rule.matches(message):
            return rule
    return None


def respond(
    message: str,
    rules: Sequence[AssistantRule] = DEFAULT_RULES,
    context: Optional[AssistantContext] = None,
) -> str:
    """Reply to ``message`` using the first matching rule, or the fallback."""
    rule = match_rule(message, rules)
    return rule.render(context) if rule else FALLBACK_RESPONSE


@dataclass(frozen=True)
class Message:
    id: str
    role: str
    content: str
    timestamp: datetime = field(default_factory=datetime.now)


def start_conversation(now: Optional[datetime] = None) -> Tuple[Message, ...]:
    return (Message(id="1", role=ROLE_ASSISTANT, content=GREETING, timestamp=now or datetime.now()),)


def send_message(
    messages: Sequence[Message],
    text: str,
    now: Optional[datetime] = None,
    rules: Sequence[AssistantRule] = DEFAULT_RULES,
    context: Optional[AssistantContext] = None,
) -> Tuple[Message, ...]:
    """Append the user's message and the assistant's reply.

    Blank input leaves the conversation unchanged.
    """
    history = tuple(messages)
    if not text or not text.strip():
        return history
    now = now or datetime.now()
    user_message = Message(
        id=mint_record_id(history, now.timestamp()),
        role=ROLE_USER,
        content=text,
        timestamp=now,
    )
    with_user = history + (user_message,)
    reply = Message(
        id=mint_record_id(with_user, now.timestamp()),
        role=ROLE_ASSISTANT,
        content=respond(text, rules, context),
        timestamp=now,
    )
    return with_user + (reply,)
