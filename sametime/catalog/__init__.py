"""
Timezone catalog pipeline.

Responsibilities:
- Load the raw world-timezone catalog supplied by the caller.
- Resolve each country to its spoken languages and flag emoji.
- Normalize raw entries into canonical location records, merging duplicates.
"""
