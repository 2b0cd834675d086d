"""
Matching layer.

Responsibilities:
- Cosine similarity between embedding vectors.
- Batch queries and candidate descriptions into one embedding call.
- Select, per query, the most similar candidate at or above the threshold.
"""
