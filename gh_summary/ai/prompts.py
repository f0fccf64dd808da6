"""
Human-editable prompt templates for issue summarization.
Edit the prompts below to modify AI behavior.
"""

# ruff: noqa

# Analyst role shared by every call about an issue
SYSTEM_PROMPT = """As an AI co-owner of a GitHub repository, you are responsible for conducting a comprehensive analysis of GitHub issues. Your analytic focus encompasses distinct elements, including the issue's title, associated labels, body text, the identity of the issue's creator, their role, and the nature of the comments on the issue. Utilizing these data points, your task is to generate a succinct, context-aware summary of the issue."""

# Corpus sentences, tokenized one at a time
ISSUE_SENTENCE = """User '{creator_login}', who holds the role of '{creator_role}', has submitted an issue titled '{title}', labeled as '{labels}', with the following post: '{body}'."""

COMMENT_SENTENCE = """{author} commented: {body}"""

# Map stage: one request per token chunk
MAP_PROMPT = """Given the issue titled '{title}' and a particular segment of body or comment text '{chunk_text}', focus on extracting the central arguments, proposed solutions, and instances of agreement or conflict among the participants. Generate an interim summary capturing the essential information in this section. This will be used later to form a comprehensive summary of the entire discussion."""

# Reduce stage after splitting: folds the interim summaries together
REDUCE_PROMPT = """User '{creator_login}', in the role of '{creator_role}', has filed an issue titled '{title}', labeled as '{labels}'. The key information you've extracted from the issue's body text and comments in segmented form are: {interim}. Concentrate on the principal arguments, suggested solutions, and areas of consensus or disagreement among the participants. From these elements, generate a concise summary of the entire issue to inform the next course of action."""

# Reduce stage when the whole corpus fits one request
DIRECT_PROMPT = """{corpus}, concentrate on the principal arguments, suggested solutions, and areas of consensus or disagreement among the participants. From these elements, generate a concise summary of the entire issue to inform the next course of action."""
