# config/defaults.py
from typing import Any, Dict, Final, List

# Served when no storage tier holds a config.json yet.
DEFAULT_SITE_CONFIG: Final[Dict[str, Any]] = {
    "title": "Portfolio | Web Enthusiast",
    "description": {
        "long": "Projects, experience and writing about web development, DevOps and databases.",
        "short": "Personal portfolio: web development and DevOps.",
    },
    "keywords": ["portfolio", "web development", "DevOps", "Database", "AWS", "Azure"],
    "author": "Site Owner",
    "email": "hello@example.com",
    "site": "https://example.com",
    "resume": "https://example.com/resume.pdf",
    "social": {
        "linkedin": "https://www.linkedin.com/",
        "github": "https://github.com/",
    },
}

DEFAULT_PROJECT_IMAGE: Final[str] = "/assets/7.png"

# Served when no storage tier holds a projects.json yet.
DEFAULT_PROJECTS: Final[List[Dict[str, Any]]] = [
    {
        "id": "portfolio",
        "category": "Portfolio",
        "title": "My Portfolio",
        "src": "/assets/projects-screenshots/portfolio/landing.png",
        "screenshots": ["landing.png"],
        "skills": {"frontend": ["Next.js", "Tailwind CSS"], "backend": []},
        "github": "https://github.com/",
        "live": "https://example.com",
        "content": "This site: marketing pages plus a small admin panel.",
    },
    {
        "id": "finance-me",
        "category": "DevOps",
        "title": "Finance Me",
        "src": "/assets/projects-screenshots/finance-me/pipeline.png",
        "screenshots": ["pipeline.png"],
        "skills": {"frontend": [], "backend": ["Jenkins", "Docker", "AWS"]},
        "live": "https://example.com/finance-me",
        "content": "CI/CD pipeline that builds, tests and deploys a banking microservice.",
    },
]
