"""
Semantic catalog matching.

Responsibilities:
- Embed free-text queries and candidate descriptions through a provider.
- Score query/candidate pairs by cosine similarity.
- Pick the best candidate per query above a similarity threshold.
"""
