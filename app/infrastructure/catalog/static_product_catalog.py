from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace

from app.domain.entities.product import (
    CATEGORY_AUDIT,
    CATEGORY_DIAGNOSTIC,
    CATEGORY_KIT,
    CATEGORY_OMNIPANEL,
    CATEGORY_TRANSFORMATION,
    Product,
)


OMNIPANEL_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="individual-founder",
        name="Individual Founder",
        description="Perfect for solo entrepreneurs and small startups",
        price=99,
        price_id="price_1RZqJDP4nRvJbyjDCacGT1gG",
        category=CATEGORY_OMNIPANEL,
        features=(
            "Complete privacy-first AI workspace",
            "Advanced security protocols",
            "Unified development environment",
            "Priority support",
            "Early access to new features",
        ),
        badge="EMERGENCY PRICING",
    ),
    Product(
        id="team-crisis-pack",
        name="Team Crisis Pack",
        description="For teams needing immediate AI security solutions",
        price=79,
        price_id="price_1RZqJNP4nRvJbyjDRDA6mK1D",
        category=CATEGORY_OMNIPANEL,
        features=(
            "Everything in Individual Founder",
            "Team collaboration tools",
            "Advanced analytics",
            "Custom integrations",
            "Dedicated account manager",
        ),
        badge="MOST POPULAR",
    ),
    Product(
        id="enterprise-emergency",
        name="Enterprise Emergency",
        description="Enterprise-grade security for large organizations",
        price=59,
        price_id="price_1RZqJuP4nRvJbyjDWpQ0xqjl",
        category=CATEGORY_OMNIPANEL,
        features=(
            "Everything in Team Crisis Pack",
            "Enterprise SSO",
            "Advanced compliance tools",
            "Custom deployment options",
            "24/7 premium support",
        ),
        badge="BEST VALUE",
    ),
    Product(
        id="supporter",
        name="Supporter",
        description="Support our mission and get early access",
        price=25,
        price_id="price_1RZqK3P4nRvJbyjDbC1jdzlL",
        category=CATEGORY_OMNIPANEL,
        features=(
            "Early access to OmniPanel",
            "Supporter badge",
            "Community access",
            "Updates and progress reports",
            "Lifetime discount on future products",
        ),
        badge="SUPPORT US",
    ),
)

IMMEDIATE_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="ai-business-diagnostic-standard",
        name="AI Business Diagnostic Report - Standard",
        description="Comprehensive AI-powered business analysis in 48 hours",
        price=497,
        price_id="price_1RZxuMP4nRvJbyjDsYfcvDNY",
        category=CATEGORY_DIAGNOSTIC,
        delivery_time="48 hours",
        features=(
            "Digital presence audit & optimization",
            "AI opportunity assessment",
            "ROI projections for AI implementation",
            "Competitive analysis & positioning",
            "Custom implementation roadmap",
            "Priority action items with timelines",
            "Professional PDF report (25-30 pages)",
            "Email support during delivery",
        ),
        badge="MOST POPULAR",
    ),
    Product(
        id="ai-business-diagnostic-premium",
        name="AI Business Diagnostic Report - Premium",
        description="Standard diagnostic plus 1-hour strategy consultation",
        price=997,
        price_id="price_1RZxuwP4nRvJbyjDzgYnNeWg",
        category=CATEGORY_DIAGNOSTIC,
        delivery_time="48 hours + 1 hour call",
        features=(
            "Everything in Standard Diagnostic",
            "1-hour strategy consultation call",
            "Personalized implementation guidance",
            "Q&A session with AI experts",
            "Custom action plan refinement",
            "Follow-up email support (30 days)",
            "Priority delivery (24 hours)",
            "Executive summary presentation",
        ),
        badge="BEST VALUE",
    ),
    Product(
        id="website-conversion-audit",
        name="Website Conversion Audit",
        description="AI-powered website performance and conversion optimization analysis",
        price=197,
        price_id="price_1RZxuyP4nRvJbyjDBA1xXx6X",
        category=CATEGORY_AUDIT,
        delivery_time="24 hours",
        features=(
            "Page speed & performance analysis",
            "SEO audit & recommendations",
            "UX/UI optimization suggestions",
            "Conversion bottleneck identification",
            "A/B testing recommendations",
            "Implementation priority matrix",
        ),
        badge="QUICK WINS",
    ),
    Product(
        id="ai-starter-kits",
        name="AI Implementation Starter Kits",
        description="Ready-to-use AI templates and guides for immediate implementation",
        price=97,
        price_id="price_1RZxuzP4nRvJbyjDPQ7kbEGU",
        category=CATEGORY_KIT,
        delivery_time="Instant",
        features=(
            "Customer Service AI Kit",
            "Marketing Automation Templates",
            "Business Analytics Dashboard",
            "Integration guides & workflows",
            "Training materials & best practices",
            "Ongoing updates & support",
        ),
        badge="BEST VALUE",
    ),
    Product(
        id="ai-transformation-5day",
        name="5-Day AI Business Transformation",
        description="Fixed-scope AI implementation with guaranteed results",
        price=2997,
        price_id="",
        category=CATEGORY_TRANSFORMATION,
        delivery_time="5 business days",
        features=(
            "Complete AI strategy development",
            "Custom AI tool implementation",
            "Team training & onboarding",
            "Process automation setup",
            "Performance monitoring dashboard",
            "30-day post-implementation support",
        ),
        badge="GUARANTEED RESULTS",
    ),
)


class StaticProductCatalog:
    def __init__(
        self,
        products: tuple[Product, ...] = OMNIPANEL_PRODUCTS + IMMEDIATE_PRODUCTS,
        *,
        price_overrides: Mapping[str, str] | None = None,
    ):
        overrides = price_overrides or {}
        self._products = tuple(_with_price_override(product, overrides) for product in products)
        self._by_id = {product.id: product for product in self._products}

    def resolve(self, product_id: str) -> Product | None:
        return self._by_id.get(product_id)

    def list_products(self, *, category: str | None = None) -> list[Product]:
        if category is None:
            return list(self._products)
        return [product for product in self._products if product.category == category]


def _with_price_override(product: Product, overrides: Mapping[str, str]) -> Product:
    value = overrides.get(product.id)
    if not value:
        return product
    return replace(product, price_id=value)
