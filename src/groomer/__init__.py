"""Backend-for-frontend for Jira ticket grooming.

Subpackages:
- ``groomer.llm``: provider selection, provider clients, generate / repair.
- ``groomer.analysis``: prompts, report schema, normalization of LLM output.
- ``groomer.jira``: thin Jira REST proxy.
"""

__version__ = "0.1.0"
