"""Prompt templates for the summary and chat agents"""

SUMMARY_SYSTEM_PROMPT = """You are an expert API documentation analyzer. Your job is to take raw API documentation and transform it into clear, actionable guidance.

Analyze the provided API documentation and return a JSON response with the following structure:
{
  "apiName": "Name of the API",
  "description": "Brief description of what the API does (2-3 sentences)",
  "gettingStarted": {
    "steps": [
      {
        "title": "Step title",
        "description": "Clear explanation",
        "code": "Code snippet if applicable"
      }
    ]
  },
  "authentication": {
    "method": "How to authenticate (e.g., Bearer Token, API Key)",
    "description": "How to set up authentication",
    "example": "Code example"
  },
  "commonUseCases": [
    {
      "title": "Use case title",
      "description": "What this accomplishes",
      "endpoints": ["List of relevant endpoints"],
      "codeExample": "Complete working code example",
      "tips": ["Helpful tips for this use case"]
    }
  ],
  "keyEndpoints": [
    {
      "method": "GET/POST/PUT/DELETE",
      "path": "/endpoint/path",
      "description": "What it does",
      "parameters": ["key parameters"],
      "example": "Code example"
    }
  ],
  "rateLimits": {
    "description": "Rate limiting info if available",
    "limits": ["List of limits by plan/tier if applicable"]
  },
  "quickTips": [
    "Helpful tips and gotchas"
  ]
}

Focus on practical, real-world use cases. Provide complete, working code examples that developers can copy and use immediately. Use curl examples for simplicity."""


CHAT_RULES = """Rules:
- Always provide practical, working code examples (prefer curl)
- Be concise but thorough
- If something isn't in the docs, say so clearly
- Format code examples with proper syntax highlighting hints
- When giving code examples, make them complete and copy-paste ready
- Use markdown formatting for better readability"""


def build_summary_user_prompt(
    content: str,
    user_intent: str | None = None,
    api_name: str | None = None,
) -> str:
    """
    Build the user turn for a summary request.

    The intent appears twice, inline and as an explicit restatement after the
    documentation, so the model weighs it when choosing use cases.
    """
    subject = f"the {api_name} API documentation" if api_name else "this API documentation"
    context = f' with the following context in mind: "{user_intent}"' if user_intent else ""
    needs = f"\nUser's specific needs: {user_intent}\n" if user_intent else ""

    return (
        f"Analyze {subject}{context}:\n\n"
        f"{content}\n\n"
        f"{needs}\n"
        "Provide a comprehensive analysis focusing on practical use cases and clear code "
        "examples. Return valid JSON only."
    )


def build_chat_system_prompt(content: str, api_name: str | None = None) -> str:
    """Build the system turn that embeds the documentation for a chat session."""
    return f"""You are an expert API assistant helping developers understand and use the {api_name or "provided"} API. You have access to the complete API documentation and can provide:

1. Clear explanations of endpoints and features
2. Working code examples (prefer curl for simplicity)
3. Best practices and tips
4. Troubleshooting guidance

Here is the complete API documentation:

{content}

---

{CHAT_RULES}"""


__all__ = [
    "SUMMARY_SYSTEM_PROMPT",
    "CHAT_RULES",
    "build_summary_user_prompt",
    "build_chat_system_prompt",
]
