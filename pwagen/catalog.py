"""
Template Catalog — the static, read-only list of shipped templates.

Adding a template means adding one TemplateDescriptor here and one
rendering rule under pwagen.content.templates. Nothing else changes.
"""
from __future__ import annotations

from typing import Optional

from .errors import UnknownTemplateError
from .models import (
    FieldDescriptor as F,
    FieldType as T,
    FieldValidation as V,
    TemplateCategory,
    TemplateDescriptor,
)

_SKILLS = (
    "JavaScript", "TypeScript", "React", "Vue", "Angular", "Node.js",
    "Python", "Java", "C#", "PHP", "Ruby", "Go", "Rust",
    "HTML/CSS", "SASS/SCSS", "Tailwind CSS", "Bootstrap",
    "MongoDB", "PostgreSQL", "MySQL", "Redis",
    "AWS", "Google Cloud", "Azure", "Docker", "Kubernetes",
)

_CUISINES = (
    "Italian", "Mexican", "Chinese", "Japanese", "Indian", "Thai",
    "French", "American", "Mediterranean", "Greek", "Korean", "Other",
)


TEMPLATES: tuple[TemplateDescriptor, ...] = (
    TemplateDescriptor(
        id="business-card",
        name="Business Card",
        description="Professional digital business card with contact information",
        category=TemplateCategory.BUSINESS,
        features=("Contact Information", "Social Links", "QR Code", "Dark Mode"),
        icon_field="logo",
        fields=(
            F("businessName", "Business Name", T.TEXT, True, "Your Business Name", V(2, 50)),
            F("tagline", "Tagline", T.TEXT, False, "Your business tagline", V(max_length=100)),
            F("ownerName", "Owner/Manager Name", T.TEXT, True, "John Doe", V(2, 50)),
            F("email", "Email", T.EMAIL, True, "contact@business.com"),
            F("phone", "Phone", T.TEL, True, "+1 (555) 123-4567"),
            F("website", "Website", T.URL, False, "https://yourbusiness.com"),
            F("address", "Address", T.TEXTAREA, False, "123 Business St, City, State 12345"),
            F("logo", "Logo", T.IMAGE),
        ),
    ),
    TemplateDescriptor(
        id="portfolio",
        name="Portfolio",
        description="Showcase your work with a clean portfolio design",
        category=TemplateCategory.PORTFOLIO,
        features=("Project Gallery", "About Section", "Contact Form", "Responsive Design"),
        icon_field="profileImage",
        fields=(
            F("name", "Your Name", T.TEXT, True, "Jane Smith", V(2, 50)),
            F("title", "Professional Title", T.TEXT, True, "Web Developer", V(2, 100)),
            F("bio", "Bio", T.TEXTAREA, True, "Tell us about yourself...", V(50, 500)),
            F("skills", "Skills", T.MULTISELECT, True, options=_SKILLS),
            F("profileImage", "Profile Image", T.IMAGE),
        ),
    ),
    TemplateDescriptor(
        id="restaurant-menu",
        name="Restaurant Menu",
        description="Digital menu for restaurants with categories and pricing",
        category=TemplateCategory.BUSINESS,
        features=("Menu Categories", "Item Photos", "Price Display", "Search Function"),
        fields=(
            F("restaurantName", "Restaurant Name", T.TEXT, True, "Delicious Eats", V(2, 50)),
            F("cuisine", "Cuisine Type", T.SELECT, True, options=_CUISINES),
            F("description", "Restaurant Description", T.TEXTAREA, False,
              "Brief description of your restaurant...", V(max_length=200)),
            F("address", "Address", T.TEXTAREA, True, "123 Food St, City, State 12345"),
            F("phone", "Phone", T.TEL, True, "+1 (555) 123-4567"),
            F("hours", "Operating Hours", T.TEXTAREA, True,
              "Mon-Fri: 11am-10pm\nSat-Sun: 12pm-11pm"),
        ),
    ),
    TemplateDescriptor(
        id="event-landing",
        name="Event Landing",
        description="Promote events with registration and details",
        category=TemplateCategory.UTILITY,
        features=("Event Details", "Registration Form", "Countdown Timer", "Social Sharing"),
        fields=(
            F("eventName", "Event Name", T.TEXT, True, "Amazing Conference 2024", V(5, 100)),
            F("eventDate", "Event Date", T.TEXT, True, "2024-12-15"),
            F("eventTime", "Event Time", T.TEXT, True, "9:00 AM - 5:00 PM"),
            F("venue", "Venue", T.TEXT, True, "Convention Center, City"),
            F("description", "Event Description", T.TEXTAREA, True,
              "Describe your event...", V(50, 1000)),
            F("speakers", "Featured Speakers", T.TEXTAREA, False, "List your speakers..."),
            F("ticketPrice", "Ticket Price", T.TEXT, False, "$99"),
        ),
    ),
    TemplateDescriptor(
        id="e-commerce",
        name="E-commerce Store",
        description="Online store with product catalog and shopping features",
        category=TemplateCategory.E_COMMERCE,
        features=("Product Catalog", "Shopping Cart", "Payment Integration", "Order Management"),
        icon_field="storeLogo",
        fields=(
            F("storeName", "Store Name", T.TEXT, True, "My Awesome Store", V(2, 50)),
            F("storeDescription", "Store Description", T.TEXTAREA, True,
              "Describe your store and products...", V(20, 500)),
            F("storeLogo", "Store Logo", T.IMAGE),
            F("productCategories", "Product Categories", T.MULTISELECT, True, options=(
                "Electronics", "Clothing", "Home & Garden", "Sports", "Books",
                "Toys", "Health & Beauty", "Food & Beverages",
            )),
            F("currency", "Currency", T.SELECT, True,
              options=("USD", "EUR", "GBP", "CAD", "AUD", "JPY")),
            F("contactEmail", "Contact Email", T.EMAIL, True, "support@store.com"),
            F("shippingInfo", "Shipping Information", T.TEXTAREA, False,
              "Shipping policies and information..."),
        ),
    ),
    TemplateDescriptor(
        id="blog",
        name="Blog/News Site",
        description="Content-focused blog with articles and news",
        category=TemplateCategory.BLOG,
        features=("Article Management", "Categories", "Comments", "SEO Optimized"),
        icon_field="authorPhoto",
        fields=(
            F("blogTitle", "Blog Title", T.TEXT, True, "My Amazing Blog", V(2, 50)),
            F("blogSubtitle", "Blog Subtitle", T.TEXT, False,
              "Sharing thoughts and ideas", V(max_length=100)),
            F("authorName", "Author Name", T.TEXT, True, "John Blogger", V(2, 50)),
            F("authorBio", "Author Bio", T.TEXTAREA, True,
              "Tell readers about yourself...", V(20, 500)),
            F("authorPhoto", "Author Photo", T.IMAGE),
            F("blogCategories", "Blog Categories", T.MULTISELECT, True, options=(
                "Technology", "Lifestyle", "Travel", "Food", "Health",
                "Business", "Entertainment", "Education",
            )),
            F("socialMedia", "Social Media Links", T.TEXTAREA, False,
              "Twitter: @username, LinkedIn: linkedin.com/in/username"),
        ),
    ),
    TemplateDescriptor(
        id="landing-page",
        name="Landing Page",
        description="High-converting landing page for products or services",
        category=TemplateCategory.UTILITY,
        features=("Call-to-Action", "Lead Capture", "Testimonials", "Feature Highlights"),
        icon_field="productImage",
        fields=(
            F("productName", "Product/Service Name", T.TEXT, True, "Amazing Product", V(2, 50)),
            F("headline", "Main Headline", T.TEXT, True,
              "Transform Your Life with Our Product", V(10, 100)),
            F("subheadline", "Sub-headline", T.TEXT, False,
              "Join thousands of satisfied customers", V(max_length=150)),
            F("productImage", "Product/Hero Image", T.IMAGE),
            F("features", "Key Features", T.MULTISELECT, True, options=(
                "Easy to Use", "Money Back Guarantee", "24/7 Support",
                "Free Shipping", "Secure Payment", "Mobile App",
            )),
            F("pricing", "Pricing", T.TEXT, True, "$99/month"),
            F("ctaText", "Call-to-Action Text", T.TEXT, True, "Get Started Now", V(2, 30)),
            F("contactEmail", "Contact Email", T.EMAIL, True, "hello@product.com"),
        ),
    ),
    TemplateDescriptor(
        id="nonprofit",
        name="Non-Profit Organization",
        description="Showcase your mission and drive donations",
        category=TemplateCategory.UTILITY,
        features=("Mission Statement", "Donation Integration", "Volunteer Signup", "Impact Stories"),
        icon_field="organizationLogo",
        fields=(
            F("organizationName", "Organization Name", T.TEXT, True, "Hope Foundation", V(2, 50)),
            F("mission", "Mission Statement", T.TEXTAREA, True,
              "Our mission is to...", V(50, 500)),
            F("organizationLogo", "Organization Logo", T.IMAGE),
            F("causes", "Causes/Focus Areas", T.MULTISELECT, True, options=(
                "Education", "Health", "Environment", "Poverty", "Animals",
                "Human Rights", "Disaster Relief", "Community Development",
            )),
            F("impactNumbers", "Impact Numbers", T.TEXTAREA, False,
              "e.g., 1000 people helped, 50 schools built..."),
            F("donationGoal", "Current Donation Goal", T.TEXT, False, "$50,000"),
            F("contactInfo", "Contact Information", T.TEXTAREA, True, "Email, phone, address..."),
        ),
    ),
)

_BY_ID: dict[str, TemplateDescriptor] = {t.id: t for t in TEMPLATES}


def find_template(template_id: str) -> Optional[TemplateDescriptor]:
    return _BY_ID.get(template_id)


def get_template(template_id: str) -> TemplateDescriptor:
    """Return the template with this id or raise UnknownTemplateError."""
    template = _BY_ID.get(template_id)
    if template is None:
        raise UnknownTemplateError(template_id)
    return template


def list_templates(category: Optional[str] = None) -> list[TemplateDescriptor]:
    if category is None:
        return list(TEMPLATES)
    return [t for t in TEMPLATES if t.category.value == category]
