"""
SameTime: compare the local time of world locations against a reference timezone.

Packages:
- catalog: turn a raw timezone catalog into canonical location records.
- view: classify, filter, sort and paginate those records.
"""
