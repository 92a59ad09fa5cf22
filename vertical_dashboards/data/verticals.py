"""
Static catalog of industry verticals and the registry used to query it.

The catalog is built once per process by ``default_registry`` and is read-only
afterwards. Lookups never raise: unknown ids come back as ``None`` and callers
decide how to render the empty state.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple

from vertical_dashboards.models import (
    Complexity,
    MetricConfig,
    Polarity,
    SiaScores,
    Threshold,
    UseCase,
    VerticalModule,
    Visualization,
)
from vertical_dashboards.thresholds import thresholds_consistent

logger = logging.getLogger(__name__)

HIGHER = Polarity.HIGHER_IS_BETTER
LOWER = Polarity.LOWER_IS_BETTER


class CatalogError(ValueError):
    """Raised when a vertical cannot be registered."""


def _use_case(
    id: str,
    name: str,
    description: str,
    complexity: str,
    estimated_time: str,
    security: int,
    integrity: int,
    accuracy: int,
) -> UseCase:
    return UseCase(
        id=id,
        name=name,
        description=description,
        complexity=Complexity(complexity),
        estimated_time=estimated_time,
        sia_scores=SiaScores(security=security, integrity=integrity, accuracy=accuracy),
    )


def _metric(
    id: str,
    name: str,
    unit: str,
    warning: float,
    critical: float,
    visualization: str,
    polarity: Polarity,
) -> MetricConfig:
    return MetricConfig(
        id=id,
        name=name,
        unit=unit,
        threshold=Threshold(warning=warning, critical=critical),
        visualization=Visualization(visualization),
        polarity=polarity,
    )


VERTICALS: Tuple[VerticalModule, ...] = (
    VerticalModule(
        id="energy",
        name="Energy & Utilities",
        description="AI governance for power generation, distribution, and smart grid management",
        features=(
            "Grid Optimization",
            "Demand Forecasting",
            "Renewable Integration",
            "Outage Prediction",
            "Energy Trading",
        ),
        regulations=("NERC CIP", "FERC", "ISO Standards", "EPA Guidelines", "PHMSA"),
        ai_agents=("GridOptimizer", "DemandPredictor", "AnomalyDetector", "RenewableBalancer"),
        use_cases=(
            _use_case("oilfield-land-lease", "Oilfield Land Lease",
                      "Manage O&G well leases, royalties, and mineral rights with AI-driven insights",
                      "high", "3-4 weeks", 92, 94, 91),
            _use_case("grid-anomaly", "Grid Anomaly Detection",
                      "Detect and prevent grid failures using real-time monitoring",
                      "high", "4-6 weeks", 92, 88, 85),
            _use_case("renewable-optimization", "Renewable Energy Optimization",
                      "Optimize renewable energy sources integration",
                      "high", "3-4 weeks", 80, 85, 90),
            _use_case("load-forecasting", "Load Forecasting",
                      "Predict energy demand using weather and consumption patterns",
                      "medium", "2-3 weeks", 82, 88, 92),
            _use_case("phmsa-compliance", "PHMSA Compliance Automation",
                      "Automated pipeline safety compliance and regulatory reporting",
                      "high", "4-6 weeks", 94, 96, 93),
            _use_case("methane-leak-detection", "Methane Leak Detection",
                      "AI-powered emissions monitoring and environmental compliance",
                      "high", "5-7 weeks", 88, 92, 95),
            _use_case("grid-resilience", "Grid Resilience & Outage Response",
                      "Predictive outage management and emergency response coordination",
                      "high", "6-8 weeks", 91, 94, 89),
            _use_case("internal-audit-governance", "Internal Audit and Governance",
                      "Automated SOX compliance and risk governance for energy operations",
                      "medium", "3-5 weeks", 96, 98, 91),
            _use_case("scada-integration", "SCADA-Legacy Integration",
                      "AI enablement for legacy SCADA and telemetry systems",
                      "high", "8-10 weeks", 93, 90, 87),
            _use_case("wildfire-prevention", "Wildfire Prevention & Infrastructure Risk",
                      "AI-driven infrastructure monitoring and risk assessment to prevent catastrophic wildfires",
                      "high", "6-8 weeks", 94, 96, 92),
            _use_case("predictive-grid-resilience", "Predictive Grid Resilience & Orchestration",
                      "Proactive grid management preventing wide-scale outages through real-time orchestration",
                      "high", "8-10 weeks", 95, 97, 93),
            _use_case("energy-supply-chain-cyber", "Energy Supply Chain Cyber Defense",
                      "Comprehensive cyber defense for critical energy infrastructure and supply chains",
                      "high", "10-12 weeks", 98, 96, 91),
        ),
        metrics=(
            _metric("grid-reliability", "Grid Reliability", "%", 95, 90, "gauge", HIGHER),
            _metric("renewable-mix", "Renewable Mix", "%", 30, 20, "pie", HIGHER),
        ),
        dashboard_widgets=("grid-status", "demand-forecast", "renewable-mix", "outage-map"),
        templates=("energy-forecast", "grid-monitor", "outage-response"),
    ),
    VerticalModule(
        id="healthcare",
        name="Healthcare & Life Sciences",
        description="AI governance for patient care, diagnostics, and medical research",
        features=(
            "Clinical Decision Support",
            "Patient Risk Assessment",
            "Drug Discovery",
            "Medical Imaging Analysis",
            "Treatment Optimization",
        ),
        regulations=("HIPAA", "FDA 21 CFR", "GDPR", "HL7 FHIR"),
        ai_agents=("DiagnosticAssistant", "RiskAnalyzer", "TreatmentOptimizer", "ComplianceMonitor"),
        use_cases=(
            _use_case("patient-risk", "Patient Risk Stratification",
                      "Identify high-risk patients for preventive care",
                      "high", "6-8 weeks", 95, 92, 87),
            _use_case("diagnosis-assist", "Diagnosis Assistant",
                      "AI-powered diagnostic support for clinicians",
                      "high", "8-10 weeks", 90, 95, 89),
            _use_case("treatment-recommend", "Treatment Recommendation",
                      "Personalized treatment plans based on patient data",
                      "medium", "4-5 weeks", 88, 90, 85),
            _use_case("clinical-trial-matching", "Clinical Trial Matching",
                      "AI-powered patient matching for clinical trials to accelerate enrollment",
                      "high", "6-8 weeks", 93, 95, 91),
            _use_case("medical-supply-chain-crisis", "Medical Supply Chain & Crisis Orchestration",
                      "Real-time orchestration of medical supplies during healthcare crises",
                      "high", "8-10 weeks", 96, 98, 94),
        ),
        metrics=(
            _metric("diagnostic-accuracy", "Diagnostic Accuracy", "%", 85, 80, "gauge", HIGHER),
            _metric("patient-outcomes", "Patient Outcomes", "score", 7, 5, "line", HIGHER),
        ),
        dashboard_widgets=("patient-monitor", "diagnostic-queue", "compliance-status", "outcome-trends"),
        templates=("clinical-decision", "patient-risk", "drug-interaction"),
    ),
    VerticalModule(
        id="finance",
        name="Financial Services",
        description="AI governance for banking, trading, and financial risk management",
        features=(
            "Fraud Detection",
            "Credit Risk Assessment",
            "Algorithmic Trading",
            "AML Compliance",
            "Portfolio Optimization",
        ),
        regulations=("SOX", "Basel III", "MiFID II", "PCI DSS", "GDPR"),
        ai_agents=("FraudDetector", "RiskAnalyzer", "ComplianceChecker", "TradingOptimizer"),
        use_cases=(
            _use_case("fraud-detection", "Real-time Fraud Detection",
                      "Detect fraudulent transactions using pattern analysis",
                      "high", "4-6 weeks", 93, 91, 88),
            _use_case("credit-scoring", "AI Credit Scoring",
                      "Advanced credit risk assessment models",
                      "medium", "3-4 weeks", 85, 88, 90),
            _use_case("aml-monitoring", "AML Transaction Monitoring",
                      "Anti-money laundering compliance monitoring",
                      "high", "5-7 weeks", 95, 93, 86),
            _use_case("insurance-risk-assessment", "Insurance Risk Assessment",
                      "AI-powered risk evaluation and underwriting for specialty insurance markets",
                      "high", "6-8 weeks", 91, 93, 89),
        ),
        metrics=(
            _metric("fraud-rate", "Fraud Detection Rate", "%", 95, 90, "gauge", HIGHER),
            _metric("false-positives", "False Positive Rate", "%", 5, 10, "bar", LOWER),
        ),
        dashboard_widgets=("fraud-alerts", "risk-dashboard", "compliance-monitor", "transaction-flow"),
        templates=("fraud-detection", "credit-risk", "aml-screening"),
    ),
    VerticalModule(
        id="manufacturing",
        name="Manufacturing & Industry 4.0",
        description="AI governance for smart factories and supply chain optimization",
        features=(
            "Predictive Maintenance",
            "Quality Control",
            "Supply Chain Optimization",
            "Production Planning",
            "Defect Detection",
        ),
        regulations=("ISO 9001", "ISO 27001", "OSHA", "EPA Standards"),
        ai_agents=("MaintenancePredictor", "QualityInspector", "SupplyOptimizer", "ProductionPlanner"),
        use_cases=(
            _use_case("predictive-maintenance", "Predictive Maintenance",
                      "Predict equipment failures before they occur",
                      "medium", "3-4 weeks", 82, 88, 91),
            _use_case("quality-inspection", "Automated Quality Inspection",
                      "Computer vision for defect detection",
                      "medium", "4-5 weeks", 78, 85, 93),
            _use_case("supply-optimization", "Supply Chain Optimization",
                      "Optimize inventory and logistics using AI",
                      "high", "6-8 weeks", 85, 87, 89),
        ),
        metrics=(
            _metric("oee", "Overall Equipment Effectiveness", "%", 85, 75, "gauge", HIGHER),
            _metric("defect-rate", "Defect Rate", "ppm", 100, 500, "line", LOWER),
        ),
        dashboard_widgets=("production-monitor", "quality-metrics", "maintenance-schedule", "supply-status"),
        templates=("maintenance-schedule", "quality-control", "supply-chain"),
    ),
    VerticalModule(
        id="retail",
        name="Retail & E-commerce",
        description="AI governance for customer experience and retail operations",
        features=(
            "Demand Forecasting",
            "Personalization",
            "Inventory Optimization",
            "Price Optimization",
            "Customer Analytics",
        ),
        regulations=("PCI DSS", "GDPR", "CCPA", "FTC Guidelines"),
        ai_agents=("DemandForecaster", "PersonalizationEngine", "PriceOptimizer", "CustomerAnalyzer"),
        use_cases=(
            _use_case("demand-forecast", "Demand Forecasting",
                      "Predict product demand using historical data",
                      "medium", "3-4 weeks", 75, 82, 88),
            _use_case("personalization", "Customer Personalization",
                      "Personalized recommendations and experiences",
                      "medium", "4-5 weeks", 80, 85, 87),
            _use_case("price-optimization", "Dynamic Price Optimization",
                      "AI-driven pricing strategies",
                      "high", "5-6 weeks", 78, 83, 90),
        ),
        metrics=(
            _metric("conversion-rate", "Conversion Rate", "%", 3, 2, "gauge", HIGHER),
            _metric("inventory-turnover", "Inventory Turnover", "ratio", 6, 4, "bar", HIGHER),
        ),
        dashboard_widgets=("sales-monitor", "inventory-status", "customer-insights", "price-analytics"),
        templates=("demand-forecast", "recommendation", "price-strategy"),
    ),
    VerticalModule(
        id="logistics",
        name="Logistics & Transportation",
        description="AI governance for supply chain and transportation management",
        features=(
            "Route Optimization",
            "Fleet Management",
            "Warehouse Automation",
            "Last-Mile Delivery",
            "Cargo Tracking",
        ),
        regulations=("DOT", "FMCSA", "IATA", "ISO 28000"),
        ai_agents=("RouteOptimizer", "FleetManager", "WarehouseController", "DeliveryPredictor"),
        use_cases=(
            _use_case("route-optimization", "Dynamic Route Optimization",
                      "Optimize delivery routes in real-time",
                      "medium", "3-4 weeks", 78, 85, 92),
            _use_case("fleet-management", "Predictive Fleet Maintenance",
                      "Predict vehicle maintenance needs",
                      "medium", "4-5 weeks", 80, 87, 89),
            _use_case("warehouse-automation", "Warehouse Automation",
                      "AI-powered warehouse operations",
                      "high", "6-8 weeks", 82, 88, 91),
            _use_case("supply-chain-disruption", "Supply Chain Disruption Orchestration",
                      "Real-time orchestration for supply chain crisis management",
                      "high", "8-10 weeks", 91, 94, 90),
        ),
        metrics=(
            _metric("on-time-delivery", "On-Time Delivery", "%", 95, 90, "gauge", HIGHER),
            _metric("fuel-efficiency", "Fuel Efficiency", "mpg", 7, 6, "line", HIGHER),
        ),
        dashboard_widgets=("fleet-tracker", "route-monitor", "delivery-status", "warehouse-metrics"),
        templates=("route-planning", "fleet-maintenance", "warehouse-ops"),
    ),
    VerticalModule(
        id="education",
        name="Education & EdTech",
        description="AI governance for personalized learning and educational analytics",
        features=(
            "Personalized Learning",
            "Student Performance Prediction",
            "Content Recommendation",
            "Automated Grading",
            "Learning Analytics",
        ),
        regulations=("FERPA", "COPPA", "GDPR", "State Education Standards"),
        ai_agents=("LearningOptimizer", "PerformanceAnalyzer", "ContentRecommender", "GradingAssistant"),
        use_cases=(
            _use_case("personalized-learning", "Adaptive Learning Paths",
                      "Create personalized learning experiences",
                      "medium", "4-5 weeks", 82, 88, 86),
            _use_case("performance-prediction", "Student Performance Prediction",
                      "Predict and prevent student dropouts",
                      "medium", "3-4 weeks", 85, 90, 84),
            _use_case("content-recommendation", "Smart Content Recommendation",
                      "AI-powered educational content suggestions",
                      "low", "2-3 weeks", 78, 85, 88),
        ),
        metrics=(
            _metric("engagement-rate", "Student Engagement", "%", 80, 70, "gauge", HIGHER),
            _metric("completion-rate", "Course Completion", "%", 85, 75, "bar", HIGHER),
        ),
        dashboard_widgets=("student-progress", "engagement-metrics", "performance-trends", "content-analytics"),
        templates=("learning-path", "performance-analysis", "content-curation"),
    ),
    VerticalModule(
        id="pharma",
        name="Pharmaceutical & Biotech",
        description="AI governance for drug discovery and clinical trials",
        features=(
            "Drug Discovery",
            "Clinical Trial Optimization",
            "Adverse Event Detection",
            "Regulatory Compliance",
            "Patient Recruitment",
        ),
        regulations=("FDA 21 CFR Part 11", "GxP", "ICH Guidelines", "EMA Regulations"),
        ai_agents=("MoleculeAnalyzer", "TrialOptimizer", "SafetyMonitor", "RegulatoryChecker"),
        use_cases=(
            _use_case("drug-discovery", "AI-Assisted Drug Discovery",
                      "Accelerate drug discovery using AI models",
                      "high", "12-16 weeks", 88, 92, 85),
            _use_case("clinical-optimization", "Clinical Trial Optimization",
                      "Optimize patient recruitment and trial design",
                      "high", "8-10 weeks", 90, 93, 87),
            _use_case("adverse-detection", "Adverse Event Detection",
                      "Early detection of drug side effects",
                      "medium", "4-6 weeks", 92, 95, 88),
        ),
        metrics=(
            _metric("trial-success", "Trial Success Rate", "%", 70, 60, "gauge", HIGHER),
            _metric("time-to-market", "Time to Market", "months", 120, 144, "bar", LOWER),
        ),
        dashboard_widgets=("trial-monitor", "safety-alerts", "regulatory-status", "discovery-pipeline"),
        templates=("drug-discovery", "clinical-trial", "safety-monitoring"),
    ),
    VerticalModule(
        id="government",
        name="Government & Public Sector",
        description="AI governance for public services and citizen engagement",
        features=(
            "Citizen Services",
            "Public Safety",
            "Resource Allocation",
            "Policy Analysis",
            "Fraud Prevention",
        ),
        regulations=("FISMA", "FedRAMP", "Privacy Act", "FOIA", "State Regulations"),
        ai_agents=("ServiceOptimizer", "SafetyAnalyzer", "ResourceAllocator", "PolicyAnalyzer"),
        use_cases=(
            _use_case("citizen-services", "Smart Citizen Services",
                      "AI-powered government service delivery",
                      "medium", "6-8 weeks", 92, 94, 86),
            _use_case("public-safety", "Public Safety Analytics",
                      "Predictive analytics for public safety",
                      "high", "8-10 weeks", 95, 93, 84),
            _use_case("resource-optimization", "Resource Optimization",
                      "Optimize public resource allocation",
                      "medium", "5-6 weeks", 88, 90, 87),
            _use_case("emergency-response-orchestration", "Coordinated Emergency Response Orchestration",
                      "AI-driven multi-agency coordination for disaster response",
                      "high", "10-12 weeks", 97, 95, 92),
            _use_case("critical-infrastructure-coordination", "National Critical Infrastructure Coordination",
                      "Unified coordination for critical infrastructure protection and resilience",
                      "high", "12-14 weeks", 98, 97, 90),
        ),
        metrics=(
            _metric("service-efficiency", "Service Efficiency", "%", 85, 75, "gauge", HIGHER),
            _metric("citizen-satisfaction", "Citizen Satisfaction", "score", 8, 7, "line", HIGHER),
        ),
        dashboard_widgets=("service-metrics", "safety-monitor", "resource-usage", "citizen-feedback"),
        templates=("citizen-service", "safety-analysis", "resource-planning"),
    ),
    VerticalModule(
        id="telecom",
        name="Telecommunications",
        description="AI governance for network optimization and customer experience",
        features=(
            "Network Optimization",
            "Predictive Maintenance",
            "Customer Churn Prevention",
            "Fraud Detection",
            "Service Quality",
        ),
        regulations=("FCC Regulations", "CPNI", "GDPR", "Net Neutrality"),
        ai_agents=("NetworkOptimizer", "ChurnPredictor", "SecurityMonitor", "QualityAnalyzer"),
        use_cases=(
            _use_case("network-optimization", "Network Performance Optimization",
                      "Optimize network performance using AI",
                      "high", "6-8 weeks", 85, 88, 91),
            _use_case("churn-prevention", "Customer Churn Prevention",
                      "Predict and prevent customer churn",
                      "medium", "4-5 weeks", 78, 85, 89),
            _use_case("network-security", "Network Security Monitoring",
                      "AI-powered network threat detection",
                      "high", "5-7 weeks", 94, 92, 87),
        ),
        metrics=(
            _metric("network-uptime", "Network Uptime", "%", 99.9, 99.5, "gauge", HIGHER),
            _metric("customer-satisfaction", "Customer Satisfaction", "NPS", 50, 30, "bar", HIGHER),
        ),
        dashboard_widgets=("network-status", "customer-metrics", "security-alerts", "quality-monitor"),
        templates=("network-optimization", "churn-analysis", "security-monitoring"),
    ),
    VerticalModule(
        id="real-estate",
        name="Real Estate",
        description="AI governance for property valuation, market analysis, and transaction automation",
        features=(
            "Property Valuation",
            "Market Analysis",
            "Transaction Automation",
            "Risk Assessment",
            "Portfolio Management",
        ),
        regulations=("RESPA", "Fair Housing Act", "TILA", "State Real Estate Laws"),
        ai_agents=("ValuationEngine", "MarketAnalyzer", "RiskAssessor", "TransactionManager"),
        use_cases=(
            _use_case("ai-pricing-governance", "AI Pricing Governance",
                      "Governed AI for real estate valuation and automated buying decisions",
                      "high", "8-10 weeks", 90, 94, 88),
        ),
        metrics=(
            _metric("valuation-accuracy", "Valuation Accuracy", "%", 95, 90, "gauge", HIGHER),
            _metric("market-volatility", "Market Volatility Index", "score", 30, 50, "line", LOWER),
        ),
        dashboard_widgets=("property-monitor", "market-trends", "valuation-accuracy", "risk-alerts"),
        templates=("property-valuation", "market-analysis", "risk-assessment"),
    ),
)


def validate_vertical(vertical: VerticalModule) -> None:
    """Raise ``CatalogError`` when ``vertical`` breaks a catalog invariant."""
    if not vertical.id:
        raise CatalogError("Vertical id must not be empty")

    seen_use_cases = set()
    for use_case in vertical.use_cases:
        if use_case.id in seen_use_cases:
            raise CatalogError(f"Duplicate use case '{use_case.id}' in vertical '{vertical.id}'")
        seen_use_cases.add(use_case.id)

    seen_metrics = set()
    for metric in vertical.metrics:
        if metric.id in seen_metrics:
            raise CatalogError(f"Duplicate metric '{metric.id}' in vertical '{vertical.id}'")
        seen_metrics.add(metric.id)
        if not thresholds_consistent(metric.threshold, metric.polarity):
            raise CatalogError(
                f"Metric '{metric.id}' thresholds (warning={metric.threshold.warning}, "
                f"critical={metric.threshold.critical}) contradict polarity {metric.polarity.value}"
            )


def _matches(values: Iterable[str], needle: str) -> bool:
    needle = needle.lower()
    return any(needle in value.lower() for value in values)


class VerticalRegistry:
    """Ordered, id-keyed collection of registered verticals."""

    def __init__(self, verticals: Iterable[VerticalModule] = ()) -> None:
        self._verticals: Dict[str, VerticalModule] = {}
        for vertical in verticals:
            self.register(vertical)

    def register(self, vertical: VerticalModule) -> None:
        validate_vertical(vertical)
        key = vertical.id.lower()
        if key in self._verticals:
            raise CatalogError(f"Vertical '{vertical.id}' is already registered")
        for use_case in vertical.use_cases:
            if self.find_use_case(use_case.id) is not None:
                raise CatalogError(f"Use case '{use_case.id}' is already registered")
        self._verticals[key] = vertical
        logger.debug("Registered vertical %s with %d use cases", vertical.id, len(vertical.use_cases))

    def lookup(self, vertical_id: str) -> Optional[VerticalModule]:
        if not vertical_id:
            return None
        return self._verticals.get(vertical_id.lower())

    def list_all(self) -> List[VerticalModule]:
        return list(self._verticals.values())

    def filter_by_feature(self, feature: str) -> List[VerticalModule]:
        return [v for v in self._verticals.values() if _matches(v.features, feature)]

    def filter_by_regulation(self, regulation: str) -> List[VerticalModule]:
        return [v for v in self._verticals.values() if _matches(v.regulations, regulation)]

    def find_use_case(self, use_case_id: str) -> Optional[Tuple[VerticalModule, UseCase]]:
        for vertical in self._verticals.values():
            for use_case in vertical.use_cases:
                if use_case.id == use_case_id:
                    return vertical, use_case
        return None

    def get_metric(self, vertical_id: str, metric_id: str) -> Optional[MetricConfig]:
        vertical = self.lookup(vertical_id)
        if vertical is None:
            return None
        return next((m for m in vertical.metrics if m.id == metric_id), None)

    def __len__(self) -> int:
        return len(self._verticals)

    def __contains__(self, vertical_id: object) -> bool:
        return isinstance(vertical_id, str) and vertical_id.lower() in self._verticals


@lru_cache(maxsize=1)
def default_registry() -> VerticalRegistry:
    return VerticalRegistry(VERTICALS)
