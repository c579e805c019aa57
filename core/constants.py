"""
Constants and lookup tables for wireframe analysis.
"""

# Semantic landmark tags - always significant
LANDMARK_TAGS = frozenset([
    'header', 'nav', 'main', 'section', 'article', 'aside', 'footer'
])

# ARIA roles that mark landmarks
LANDMARK_ROLES = frozenset([
    'banner', 'navigation', 'main', 'contentinfo',
    'complementary', 'region', 'search', 'form'
])

# Tags that never represent layout structure
SKIP_TAGS = frozenset([
    # Text content
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'p', 'blockquote', 'pre',
    # Inline
    'span', 'a', 'em', 'strong', 'b', 'i', 'label', 'small', 'sub', 'sup',
    'abbr', 'code', 'kbd', 'mark', 'q', 's', 'u', 'var', 'time', 'br', 'wbr',
    # Non-visual
    'script', 'style', 'link', 'meta', 'noscript', 'template',
    # Media (rendered as hints, not blocks)
    'img', 'svg', 'picture', 'video', 'audio', 'canvas', 'iframe',
    # Form controls
    'input', 'textarea', 'select', 'button', 'form',
    # Lists
    'ul', 'ol', 'li', 'dl', 'dt', 'dd',
    # Tables
    'table', 'thead', 'tbody', 'tr', 'td', 'th',
])

# Ordered (regex, label) table for section archetypes; first match wins.
# Matched against the whole class string, case-insensitive.
STRUCTURAL_CLASS_PATTERNS = [
    (r'hero[-_\s]?section|hero[-_\s]?banner|hero$', 'Hero'),
    (r'hero', 'Hero'),
    (r'card[-_\s]?(grid|list|container)', 'Cards'),
    (r'card', 'Card'),
    (r'feature[-_\s]?(grid|list|section)', 'Features'),
    (r'feature', 'Feature'),
    (r'service[-_\s]?(grid|list|section)', 'Services'),
    (r'service', 'Service'),
    (r'testimonial', 'Testimonials'),
    (r'pricing', 'Pricing'),
    (r'cta|call[-_]?to[-_]?action', 'CTA'),
    (r'banner', 'Banner'),
    (r'sidebar', 'Sidebar'),
    (r'contact[-_\s]?(form|section)', 'Contact'),
    (r'about[-_\s]?(section|us)', 'About'),
    (r'team', 'Team'),
    (r'faq', 'FAQ'),
    (r'gallery', 'Gallery'),
    (r'portfolio', 'Portfolio'),
    (r'blog[-_\s]?(post|section)', 'Blog'),
    (r'news', 'News'),
    (r'stats|statistics', 'Stats'),
    (r'benefits', 'Benefits'),
    (r'partners|clients|logos', 'Partners'),
    (r'newsletter', 'Newsletter'),
    (r'social', 'Social'),
    (r'map[-_\s]?(section|container)', 'Map'),
    (r'location', 'Location'),
    (r'hours|schedule|opening', 'Hours'),
]

# Per-token patterns for generic layout / utility classes
GENERIC_CONTAINER_PATTERNS = [
    r'^container$',
    r'^wrapper$',
    r'^inner$',
    r'^outer$',
    r'^content$',
    r'^box$',
    r'^row$',
    r'^col(umn)?[-_]?\d*$',
    r'^grid$',
    r'^flex$',
    r'^layout$',
    r'^max[-_]?w',
    r'^mx[-_]?auto',
    r'^px[-_]?\d',
    r'^py[-_]?\d',
    r'^p[-_]?\d',
    r'^m[-_]?\d',
]

ROLE_LABELS = {
    'banner': 'Header',
    'navigation': 'Navigation',
    'main': 'Main Content',
    'contentinfo': 'Footer',
    'complementary': 'Sidebar',
    'search': 'Search',
    'region': 'Region',
}

TAG_LABELS = {
    'header': 'Header',
    'nav': 'Navigation',
    'main': 'Main Content',
    'section': 'Section',
    'article': 'Article',
    'aside': 'Sidebar',
    'footer': 'Footer',
}

# Labels that carry no information; wrapper collapse prefers a child over these
FALLBACK_LABELS = frozenset(['Block', 'Section'])

HEADING_LABEL_TAGS = frozenset(['h1', 'h2', 'h3'])
CONTENT_LABEL_TAGS = frozenset(['section', 'article', 'div'])
HEADING_LABEL_MAX_LENGTH = 50
HEADING_LABEL_TRUNCATE = 25

GRID_DISPLAYS = frozenset(['grid', 'inline-grid'])
FLEX_DISPLAYS = frozenset(['flex', 'inline-flex'])
ROW_FLEX_DIRECTIONS = frozenset(['row', 'row-reverse'])

# Grid detection thresholds; children below the decorative area are noise
GRID_DECORATIVE_AREA = 1000
GRID_SIZE_TOLERANCE = 0.3

# Child must cover this share of the parent for wrapper collapse
WRAPPER_COVERAGE_RATIO = 0.85

# Minimum sizes for content hint detection
CONTENT_MIN_SIZES = {
    'image': {'width': 30, 'height': 30},
    'button': {'width': 50, 'height': 20},
    'text': {'width': 50, 'height': 10},
    'icon': {'width': 12, 'height': 12},
}

# Max content hints per node per type
CONTENT_MAX_COUNTS = {
    'image': 5,
    'button': 3,
    'text': 1,
    'icon': 6,
}

IMAGE_TAGS = frozenset(['img', 'picture', 'figure'])
TEXT_BLOCK_TAGS = frozenset(['p', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6'])
ICON_FONT_TAGS = frozenset(['i', 'span'])
BUTTON_INPUT_TYPES = frozenset(['submit', 'button'])

# Small SVGs (up to 20x20) are icons, larger ones are images
SVG_ICON_MAX_AREA = 400
TEXT_ELEMENT_MIN_SIZE = {'width': 20, 'height': 10}
BUTTON_LABEL_MAX_LENGTH = 20

BUTTON_CLASS_PATTERN = r'\b(btn|button|cta)\b'
ICON_CLASS_PATTERN = r'\b(icon|fa-|bi-|material-icons)\b'

NODE_ID_PREFIX = 'wf-node-'
