"""라벨 분류 스크립트

모델 예측 라벨을 로컬에서 바로 분류하고, 필요하면 라벨 보정을 기록합니다.
보정은 LABEL_MAP_PATH(기본 .data/label-map.json)에 저장되어 이후 실행에 반영됩니다.

Usage:
    python scripts/classify_labels.py banana:0.7 "plastic bottle":0.2
    python scripts/classify_labels.py --file fruit_peel_compost.jpg
    python scripts/classify_labels.py --correct banana Recyclable
    python scripts/classify_labels.py --corrections
    python scripts/classify_labels.py --forget banana
    python scripts/classify_labels.py --reset
"""

import sys

from app.core.logging import setup_logging
from app.domains.waste.corrections.store import (
    get_local_store,
    record_user_correction,
)
from app.domains.waste.rewards import calculate_eco_points, confidence_to_percent
from app.domains.waste.scoring import (
    Prediction,
    build_tips,
    score_from_filename,
    score_from_predictions,
)


def parse_prediction(arg: str) -> Prediction:
    """`label:probability` 인자를 Prediction으로 변환 (확률 생략 시 1.0)"""
    label, sep, probability = arg.rpartition(":")
    if not sep:
        return Prediction(label=arg, probability=1.0)
    return Prediction(label=label, probability=float(probability))


def classify_predictions(args: list[str]) -> None:
    predictions = [parse_prediction(arg) for arg in args]
    result = score_from_predictions(predictions, get_local_store().get_map())
    points = calculate_eco_points(
        result.category, confidence_to_percent(result.confidence)
    )

    print(f"\n🏷️  {result.category.value} (confidence: {result.confidence:.3f})")
    print(f"  top label : {result.top_label or '-'}")
    for category, score in result.scores.items():
        print(f"  {category.value:<14}: {score:.3f}")
    print(f"  eco points: {points}")
    for tip in build_tips(result.category, basis=result.matched_labels):
        print(f"  - {tip}")


def classify_filename(filename: str) -> None:
    result = score_from_filename(filename)
    category = result.waste_category

    print(f"\n🏷️  {result.label} → {category.value} ({result.confidence}%)")
    print(f"  eco points: {calculate_eco_points(category, result.confidence)}")
    for tip in build_tips(category, basis=result.matched_keywords, fallback=True):
        print(f"  - {tip}")


def show_corrections() -> None:
    corrections = get_local_store().get_map()
    if not corrections:
        print("\n저장된 라벨 보정이 없습니다.")
        return

    print(f"\n📚 라벨 보정 {len(corrections)}건")
    for label, category in sorted(corrections.items()):
        print(f"  {label} → {category.value}")


def main() -> int:
    setup_logging()
    args = sys.argv[1:]

    if not args or args[0] in {"-h", "--help"}:
        print(__doc__)
        return 0 if args else 1

    if args[0] == "--corrections":
        show_corrections()
        return 0

    if args[0] == "--correct":
        if len(args) != 3:
            print("Usage: --correct <label> <Recyclable|Organic|General Waste>")
            return 1
        try:
            record_user_correction(args[1], args[2])
        except ValueError as e:
            print(f"❌ {e}")
            return 1
        print(f"✅ {args[1].lower()} → {args[2]}")
        return 0

    if args[0] == "--forget":
        if len(args) != 2:
            print("Usage: --forget <label>")
            return 1
        if not get_local_store().remove(args[1]):
            print(f"❌ 저장된 보정이 없습니다: {args[1].lower()}")
            return 1
        print(f"🗑️  {args[1].lower()} 보정 삭제")
        return 0

    if args[0] == "--reset":
        get_local_store().clear()
        print("🗑️  모든 라벨 보정 삭제")
        return 0

    if args[0] == "--file":
        if len(args) != 2:
            print("Usage: --file <filename>")
            return 1
        classify_filename(args[1])
        return 0

    try:
        classify_predictions(args)
    except ValueError as e:
        print(f"❌ 잘못된 예측 인자: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
