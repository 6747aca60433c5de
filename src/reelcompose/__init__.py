"""reelcompose — template-driven photo slideshow timelines.

Search photos for a query, lay them out on a multi-track timeline with
a named style template (timings, motion effects, luma wipes, title and
soundtrack), and queue the result with a cloud render service.
"""
