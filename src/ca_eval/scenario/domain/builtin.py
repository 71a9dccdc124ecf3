"""Hand-authored compliance conversations that ship with the console.

They are always available, whatever the remote scenario catalog returns, so
the compliance path can be exercised without any external configuration.
"""

from ca_eval.analysis.domain.conversation import Conversation, Message
from ca_eval.scenario.domain.expectation import ScoreExpectation
from ca_eval.scenario.domain.scenario import Scenario

PERFECT_COMPLIANCE = Scenario(
    id="builtin-perfect-compliance",
    name="Perfect Compliance",
    category="compliance",
    conversation=Conversation(
        messages=[
            Message(
                sender="agent",
                text="Hello! Thank you for calling TechSupport. My name is Sarah."
                " How can I help you today?",
            ),
            Message(
                sender="customer",
                text="Hi Sarah, I'm frustrated because my service isn't working!",
            ),
            Message(
                sender="agent",
                text="I'm so sorry to hear about that, Mr. Johnson."
                " Let me fix this right away.",
            ),
            Message(sender="customer", text="Thank you, I appreciate your help."),
            Message(
                sender="agent",
                text="I've resolved the issue, Mr. Johnson."
                " Everything should be working perfectly now.",
            ),
        ],
        customer_name="Mr. Johnson",
        agent_name="Sarah",
    ),
    expected=ScoreExpectation.parse("> 90"),
    metadata={"builtin": True},
)

POOR_COMPLIANCE = Scenario(
    id="builtin-poor-compliance",
    name="Poor Compliance",
    category="compliance",
    conversation=Conversation(
        messages=[
            Message(sender="agent", text="Yeah, what do you want?"),
            Message(
                sender="customer", text="I'm really angry! This service is terrible!"
            ),
            Message(sender="agent", text="Not my problem. I'll transfer you."),
            Message(sender="customer", text="This is ridiculous!"),
            Message(sender="agent", text="Whatever."),
        ],
        customer_name="Customer",
        agent_name="Agent",
    ),
    expected=ScoreExpectation.parse("< 30"),
    metadata={"builtin": True},
)

EMOTION_HANDLING = Scenario(
    id="builtin-emotion-handling",
    name="Emotion Handling Test",
    category="compliance",
    conversation=Conversation(
        messages=[
            Message(sender="agent", text="Good morning! How can I assist you today?"),
            Message(
                sender="customer",
                text="I'm terrified that my account has been hacked!",
            ),
            Message(
                sender="agent",
                text="I understand your concern and I'm here to help."
                " Let me immediately check your account security.",
            ),
            Message(
                sender="customer",
                text="Oh wow, thank you for taking this so seriously!",
            ),
            Message(
                sender="agent",
                text="Your account is secure. I've added extra security measures"
                " for your peace of mind.",
            ),
        ],
        customer_name="Valued Customer",
        agent_name="Support Agent",
    ),
    expected=ScoreExpectation.parse("> 80"),
    metadata={"builtin": True},
)

BUILTIN_COMPLIANCE_SCENARIOS: tuple[Scenario, ...] = (
    PERFECT_COMPLIANCE,
    POOR_COMPLIANCE,
    EMOTION_HANDLING,
)
