"""Randomized demo datasets.

Each generator draws from its own random.Random, so passing a seed makes the
output reproducible. Datasets go through build_dataset and get inferred types
like any parsed file.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Optional

from .ingest import build_dataset
from .models import Dataset

SALES_REGIONS = ["North", "South", "East", "West", "Central"]
PRODUCTS = ["Laptop", "Phone", "Tablet", "Monitor", "Keyboard", "Mouse", "Headphones"]
CATEGORIES = ["Electronics", "Accessories", "Software", "Services"]
DEPARTMENTS = ["Engineering", "Sales", "Marketing", "HR", "Finance", "Operations"]
TRAFFIC_SOURCES = ["Organic", "Direct", "Social", "Referral", "Email", "Paid"]


def _random_date(rng: random.Random, year: int) -> str:
    month = rng.randint(1, 12)
    day = rng.randint(1, 28)
    return f"{year}-{month:02d}-{day:02d}"


def generate_sales_dataset(rng: random.Random) -> Dataset:
    headers = ["Date", "Region", "Product", "Category", "Quantity", "UnitPrice", "Revenue"]
    rows = []
    for _ in range(100):
        quantity = rng.randint(1, 50)
        unit_price = rng.randint(50, 2000)
        rows.append(
            [
                _random_date(rng, 2024),
                rng.choice(SALES_REGIONS),
                rng.choice(PRODUCTS),
                rng.choice(CATEGORIES),
                str(quantity),
                str(unit_price),
                str(quantity * unit_price),
            ]
        )
    return build_dataset(headers, rows)


def generate_employee_dataset(rng: random.Random) -> Dataset:
    headers = ["EmployeeID", "Department", "Salary", "YearsExperience", "PerformanceScore", "Remote"]
    rows = []
    for i in range(80):
        years = rng.randint(1, 20)
        salary = 40000 + years * 5000 + rng.randint(-10000, 10000)
        rows.append(
            [
                f"EMP{1000 + i:04d}",
                rng.choice(DEPARTMENTS),
                str(salary),
                str(years),
                str(rng.randint(1, 5)),
                "Yes" if rng.random() > 0.5 else "No",
            ]
        )
    return build_dataset(headers, rows)


def generate_web_traffic_dataset(rng: random.Random) -> Dataset:
    headers = ["Date", "PageViews", "UniqueVisitors", "BounceRate", "AvgSessionDuration", "Source"]
    rows = []
    for _ in range(90):
        page_views = rng.randint(1000, 50000)
        unique_visitors = int(page_views * (0.3 + rng.random() * 0.4))
        rows.append(
            [
                _random_date(rng, 2024),
                str(page_views),
                str(unique_visitors),
                f"{30 + rng.random() * 40:.1f}",
                str(rng.randint(60, 300)),
                rng.choice(TRAFFIC_SOURCES),
            ]
        )
    return build_dataset(headers, rows)


@dataclass(frozen=True)
class SampleDataset:
    id: str
    name: str
    description: str
    generator: Callable[[random.Random], Dataset]


SAMPLE_DATASETS: tuple[SampleDataset, ...] = (
    SampleDataset(
        "sales",
        "Sales Data 2024",
        "Sample sales transactions with products, regions, and revenue",
        generate_sales_dataset,
    ),
    SampleDataset(
        "employees",
        "Employee Data",
        "Sample employee records with salary, experience, and performance data",
        generate_employee_dataset,
    ),
    SampleDataset(
        "traffic",
        "Web Traffic Analytics",
        "Sample website analytics with page views, visitors, and traffic sources",
        generate_web_traffic_dataset,
    ),
)


def generate_dataset_by_id(dataset_id: str, seed: Optional[int] = None) -> Optional[Dataset]:
    for sample in SAMPLE_DATASETS:
        if sample.id == dataset_id:
            return sample.generator(random.Random(seed))
    return None
