#!/usr/bin/env python3
"""
Seed the catalog file with deterministic random exams.

Features:
- Deterministic: fixed seed → same catalog every run
- Idempotent: replaces the existing catalog file
- Realism-lite: counts correlated with age, subject-specific tags

Usage:
    python scripts/seed_exams.py
    EXAM_METADATA_PATH=/tmp/metadata.json python scripts/seed_exams.py
"""

from __future__ import annotations

import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from exam_catalog.adapters.json_exam_repository import JsonExamRepository
from exam_catalog.domain.exam import ExamEntry
from exam_catalog.domain.upload import format_file_size
from exam_catalog.infra.config import metadata_path


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_EXAMS = 40
SEED_EPOCH = datetime(2024, 9, 1, tzinfo=timezone.utc)


# ==============================================================================
# Catalog Data
# ==============================================================================

TAGS_BY_SUBJECT = {
    "数学": ["函数", "导数", "数列", "立体几何", "概率统计"],
    "语文": ["文言文", "现代文阅读", "作文", "古诗词"],
    "英语": ["阅读理解", "完形填空", "语法填空", "书面表达"],
    "物理": ["力学", "电磁学", "热学", "光学"],
    "化学": ["有机化学", "化学平衡", "电化学", "实验探究"],
    "生物": ["遗传", "细胞", "生态", "稳态与调节"],
}

GRADES = ["高一", "高二", "高三"]
DIFFICULTIES = ["简单", "中等", "困难"]
SOURCES = ["内部上传", "联考", "名校模拟", "历年真题"]
REGIONS = ["北京", "上海", "浙江", "江苏", "广东", "湖北"]
TERMS = ["期中考试", "期末考试", "月考", "模拟考试"]


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_exam(index: int) -> ExamEntry:
    """Generate a single random exam; higher indices are more recent uploads."""
    subject = random.choice(list(TAGS_BY_SUBJECT))
    grade = random.choice(GRADES)
    region = random.choice(REGIONS)
    uploaded = SEED_EPOCH + timedelta(days=index * 3, hours=random.randint(0, 23))
    year = uploaded.year

    # Older uploads have had more time to collect views
    age_days = NUM_EXAMS * 3 - index * 3
    views = random.randint(age_days, age_days * 10 + 20)
    downloads = random.randint(0, max(1, views // 3))

    file_size = random.randint(200 * 1024, 8 * 1024 * 1024)
    tags = random.sample(TAGS_BY_SUBJECT[subject], k=2)

    return ExamEntry(
        id=f"exam-seed-{index:04d}",
        name=f"{year}年{region}{grade}{subject}{random.choice(TERMS)}",
        description=f"{region}{grade}{subject}试卷，含{'、'.join(tags)}等考点。",
        subject=subject,
        difficulty=random.choice(DIFFICULTIES),
        grade=grade,
        source=random.choice(SOURCES),
        views=views,
        downloads=downloads,
        tags=tuple(tags),
        preview_images=(),
        file_url=f"./uploads/files/seed_exam_{index:04d}.pdf",
        file_size=file_size,
        file_size_formatted=format_file_size(file_size),
        file_format="PDF",
        year=year,
        author="管理员",
        page_count=random.randint(4, 12),
        recommended_time=random.choice([90, 120, 150]),
        upload_date=uploaded.date().isoformat(),
        upload_timestamp=int(uploaded.timestamp() * 1000),
        last_modified=uploaded.isoformat(),
        knowledge_points=tuple(tags),
        question_count=random.randint(15, 25),
        total_score=150 if subject in ("数学", "语文", "英语") else 100,
        has_answer=random.random() < 0.7,
        answer_included=random.random() < 0.5,
        is_original=random.random() < 0.3,
        region=region,
    )


def seed_exams(num_exams: int = NUM_EXAMS, seed: int = RANDOM_SEED) -> None:
    """
    Replace the catalog file with random exams.

    Args:
        num_exams: Number of exams to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)
    path = metadata_path()

    print(f"🌱 Seeding {path} with {num_exams} exams (seed={seed})...")

    if path.exists():
        print("🗑️  Removing existing catalog...")
        path.unlink()

    repository = JsonExamRepository(path, clock=lambda: SEED_EPOCH)

    # add() prepends, so insert oldest first to end up newest-first
    exams = [generate_exam(index) for index in range(num_exams)]
    stats = None
    for exam in exams:
        stats = repository.add(exam)

    print(f"✅ Successfully seeded {len(exams)} exams!")

    if stats is not None:
        print("\n📊 Subjects:")
        for subject, count in stats.subjects.items():
            print(f"   {subject}: {count}")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_exams()
    except Exception as e:
        print(f"❌ Error seeding catalog: {e}", file=sys.stderr)
        sys.exit(1)
