from __future__ import annotations
import random
from typing import AsyncIterator, List

from aibot.constants import API_KEY_WARNING
from aibot.schemas.chat import ModelSelection, Token


CODE_EXAMPLE = """

```javascript
// Example code snippet
function example() {
  console.log('This is a sample function!');
  return 'Hello World';
}

example();
```

This demonstrates the concept we discussed with practical implementation."""

EXPLANATION = (
    "\n\n**Detailed Explanation:**\n\n"
    "1. **First Point**: This covers the basic concept\n"
    "2. **Second Point**: Here we dive deeper into the mechanics  \n"
    "3. **Third Point**: Finally, we look at practical applications\n\n"
    "This step-by-step breakdown should help clarify the topic for you."
)

LIST_CONTENT = """

**Here's a comprehensive list:**

• **Item 1**: Important first consideration
• **Item 2**: Key second element
• **Item 3**: Critical third factor
• **Item 4**: Essential fourth component

Each of these points contributes to the overall understanding."""

TIPS = [
    "💡 **Tip**: Use proper markdown formatting for better readability!",
    "🚀 **Tip**: The streaming feature makes conversations feel more natural.",
    "⭐ **Tip**: Try the favorites feature to save important chats.",
    "🔍 **Tip**: Use the search functionality to find previous conversations.",
]

CODE_KEYWORDS = ("code", "programming", "function")
EXPLAIN_KEYWORDS = ("explain", "how")
LIST_KEYWORDS = ("list", "steps")


def _templates(message: str) -> List[str]:
    return [
        "⚠️ **API Key Required**: To get real AI responses, please add your Groq API key to the `.env` file.\n\n",
        "Here's how to set it up:\n\n",
        "1. Get a free API key from [Groq Console](https://console.groq.com)\n",
        "2. Create a `.env` file in the server directory\n",
        "3. Add: `GROQ_API_KEY=your_key_here`\n\n",
        "**Sample code example:**\n\n",
        "```javascript\n",
        "// JavaScript example\n",
        "function greet(name) {\n",
        "  return `Hello, ${name}!`;\n",
        "}\n",
        "\n",
        "console.log(greet('World'));\n",
        "```\n\n",
        "```python\n",
        "# Python example\n",
        "def calculate_fibonacci(n):\n",
        "    if n <= 1:\n",
        "        return n\n",
        "    return calculate_fibonacci(n-1) + calculate_fibonacci(n-2)\n",
        "\n",
        "print(calculate_fibonacci(10))\n",
        "```\n\n",
        "For now, you're seeing this mock response. The UI features like search, favorites, "
        "and `inline code` highlighting are all working!\n\n",
        "Questions about: **" + message + "**",
    ]


def get_mock_response(message: str) -> str:
    """Build the contextual mock reply for ``message``.

    The template is picked from the sum of the character codes so the same
    text always gets the same reply. At most one contextual block is appended.
    """
    templates = _templates(message)
    index = sum(ord(ch) for ch in message) % len(templates)
    response = templates[index]

    lowered = message.lower()
    if any(k in lowered for k in CODE_KEYWORDS):
        response += CODE_EXAMPLE
    elif any(k in lowered for k in EXPLAIN_KEYWORDS):
        response += EXPLANATION
    elif any(k in lowered for k in LIST_KEYWORDS):
        response += LIST_CONTENT
    return response


def get_random_tip() -> str:
    return random.choice(TIPS)


def split_words(text: str) -> List[str]:
    """Split on single spaces, keeping a trailing space on every word but the last."""
    words = text.split(" ")
    return [w + (" " if i < len(words) - 1 else "") for i, w in enumerate(words)]


def setup_notice(requested_model: str) -> str:
    return f"⚠️ **API Key Required** (Requested: {requested_model})\n\n{API_KEY_WARNING}\n\n"


class MockProvider:
    id = "mock"

    async def stream(self, prompt: str, selection: ModelSelection) -> AsyncIterator[Token]:
        yield Token(content=setup_notice(selection.requested_model), finished=False)
        words = split_words(get_mock_response(prompt))
        for i, word in enumerate(words):
            yield Token(content=word, finished=i == len(words) - 1)
