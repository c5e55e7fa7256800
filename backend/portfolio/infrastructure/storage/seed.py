"""Seed content written the first time the document store is initialized."""

import copy
from typing import Any

_SEED_DOCUMENT: dict[str, Any] = {
    "projects": [
        {
            "id": 1,
            "name": "E-commerce Platform",
            "description": "A full-featured e-commerce platform with payment integration and inventory management.",
            "image": "https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
            "category": "Design & Development",
            "location": "Remote",
        },
        {
            "id": 2,
            "name": "Healthcare App",
            "description": "Mobile application for healthcare providers to manage patient records and appointments.",
            "image": "https://images.unsplash.com/photo-1559757148-5c350d0d3c56?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
            "category": "Mobile Development",
            "location": "New York",
        },
        {
            "id": 3,
            "name": "Corporate Website",
            "description": "A responsive corporate website with CMS integration and SEO optimization.",
            "image": "https://images.unsplash.com/photo-1460925895917-afdab827c52f?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
            "category": "Web Design",
            "location": "San Francisco",
        },
    ],
    "clients": [
        {
            "id": 1,
            "name": "Rowhan Smith",
            "designation": "CEO, Feverbearer",
            "description": "Working with Flipr Digital was a game-changer for our business. Their team delivered exceptional results.",
            "image": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        },
        {
            "id": 2,
            "name": "Shijpa Kayak",
            "designation": "Brand Designer",
            "description": "The design team at Flipr Digital is incredibly talented. They understood our vision perfectly.",
            "image": "https://images.unsplash.com/photo-1494790108755-2616b612b786?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        },
        {
            "id": 3,
            "name": "John Lepore",
            "designation": "CEO, TechSolutions",
            "description": "Their marketing strategies increased our conversion rate by 40% in just three months.",
            "image": "https://images.unsplash.com/photo-1500648767791-00dcc994a43e?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
        },
    ],
    "contacts": [],
    "newsletter": [],
    "activity": [
        {
            "id": 1,
            "icon": "fa-project-diagram",
            "title": "New Project Added",
            "description": "E-commerce Platform project was added to the portfolio",
            "time": "2 hours ago",
        },
        {
            "id": 2,
            "icon": "fa-users",
            "title": "New Client Added",
            "description": "Rowhan Smith was added to happy clients",
            "time": "1 day ago",
        },
        {
            "id": 3,
            "icon": "fa-envelope",
            "title": "New Contact Form Submission",
            "description": "John Doe submitted a contact form",
            "time": "2 days ago",
        },
    ],
}


def seed_document() -> dict[str, Any]:
    """Fresh copy of the sample content, safe to mutate."""
    return copy.deepcopy(_SEED_DOCUMENT)
