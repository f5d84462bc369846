"""
Data Module - Static portfolio content
All page content is defined here at import time; nothing is fetched or saved.
"""

from models import ContactInfoEntry, NavLink


# Page anchors, in page order
SECTION_IDS = (
    'home',
    'about',
    'skills',
    'experience',
    'projects',
    'certifications',
    'education',
    'contact',
)

# Templates mounted by the application shell, in order
SECTION_ORDER = (
    'navbar',
    'hero',
    'about',
    'skills',
    'experience',
    'projects',
    'certifications',
    'education',
    'contact',
    'footer',
)

NAV_LINKS = (
    NavLink('Home', 'home'),
    NavLink('About', 'about'),
    NavLink('Skills', 'skills'),
    NavLink('Experience', 'experience'),
    NavLink('Projects', 'projects'),
    NavLink('Certifications', 'certifications'),
    NavLink('Education', 'education'),
    NavLink('Contact', 'contact'),
)

CONTACT_INFO = (
    ContactInfoEntry('fa-solid fa-envelope', 'Email', 'alex.morgan@example.com', 'mailto:alex.morgan@example.com'),
    ContactInfoEntry('fa-solid fa-phone', 'Phone', '+1 (555) 014-2398', 'tel:+15550142398'),
    ContactInfoEntry('fa-brands fa-linkedin', 'LinkedIn', 'linkedin.com/in/alexmorgan', 'https://www.linkedin.com/in/alexmorgan'),
    ContactInfoEntry('fa-brands fa-github', 'GitHub', 'github.com/alexmorgan', 'https://github.com/alexmorgan'),
)

PROFILE = {
    'name': 'Alex Morgan',
    'title': 'Full-Stack Software Engineer',
    'tagline': 'I build reliable web applications and the tooling around them.',
    'about': [
        'Software engineer with a focus on Python back ends, REST APIs and '
        'pragmatic front ends.',
        'I enjoy turning loosely defined problems into small, well-tested '
        'services that are easy to operate.',
    ],
    'location': 'Portland, OR',
}

SKILLS = [
    {'category': 'Languages', 'items': ['Python', 'JavaScript', 'TypeScript', 'SQL']},
    {'category': 'Frameworks', 'items': ['Flask', 'FastAPI', 'React', 'Bootstrap']},
    {'category': 'Data & Storage', 'items': ['PostgreSQL', 'Redis', 'SQLAlchemy']},
    {'category': 'Tooling', 'items': ['Docker', 'GitHub Actions', 'pytest', 'Linux']},
]

EXPERIENCE = [
    {
        'role': 'Software Engineer',
        'company': 'Northwind Labs',
        'period': '2022 - Present',
        'highlights': [
            'Built the customer-facing REST API serving 2M requests per day.',
            'Cut CI time in half by parallelizing the test suite.',
        ],
    },
    {
        'role': 'Junior Developer',
        'company': 'Brightline Studio',
        'period': '2020 - 2022',
        'highlights': [
            'Shipped marketing sites and internal dashboards with Flask and React.',
            'Maintained the transactional email integration for client sites.',
        ],
    },
]

PROJECTS = [
    {
        'title': 'Trailhead',
        'description': 'Route planner for multi-day hikes with offline map tiles.',
        'technologies': ['Python', 'Flask', 'Leaflet'],
        'github_url': 'https://github.com/alexmorgan/trailhead',
        'demo_url': '',
    },
    {
        'title': 'Ledgerly',
        'description': 'Small-business bookkeeping API with CSV import and monthly reports.',
        'technologies': ['FastAPI', 'PostgreSQL', 'Docker'],
        'github_url': 'https://github.com/alexmorgan/ledgerly',
        'demo_url': 'https://ledgerly.example.com',
    },
    {
        'title': 'Portfolio',
        'description': 'This site: a single-page portfolio with an EmailJS contact form.',
        'technologies': ['Flask', 'Bootstrap', 'EmailJS'],
        'github_url': 'https://github.com/alexmorgan/portfolio',
        'demo_url': '',
    },
]

CERTIFICATIONS = [
    {'name': 'AWS Certified Developer - Associate', 'issuer': 'Amazon Web Services', 'year': '2023'},
    {'name': 'Professional Scrum Master I', 'issuer': 'Scrum.org', 'year': '2022'},
]

EDUCATION = [
    {
        'degree': 'B.S. Computer Science',
        'institution': 'Oregon State University',
        'period': '2016 - 2020',
    },
]


def get_portfolio_data():
    """Return all page content as a single dict for templates"""
    return {
        'profile': PROFILE,
        'skills': SKILLS,
        'experience': EXPERIENCE,
        'projects': PROJECTS,
        'certifications': CERTIFICATIONS,
        'education': EDUCATION,
    }
