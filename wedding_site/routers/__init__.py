"""Route groups for the wedding site.

This module collects logically-related endpoints:
- home: the home page with link-preview metadata injected
- photos: live photo listing for the gallery script
- favicons: fixed-path icon and manifest endpoints browsers probe for
"""
