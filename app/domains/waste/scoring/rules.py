"""분류 키워드 규칙 테이블

이미지 모델 라벨 분류용 키워드 세트와 파일명 Fallback 분류 규칙을 정의합니다.
모든 키워드는 소문자이며 부분 문자열(substring)로 매칭합니다.
"""

from dataclasses import dataclass

from app.domains.waste.scoring.types import Category


@dataclass(frozen=True)
class CategoryKeywordSet:
    """카테고리별 키워드 세트 (불변)

    Attributes:
        organic: 유기성 폐기물 키워드
        recyclable: 재활용 키워드
    """

    organic: tuple[str, ...]
    recyclable: tuple[str, ...]

    def match(self, label: str) -> tuple[Category, str] | None:
        """라벨에 매칭되는 첫 번째 (카테고리, 키워드) 반환

        유기성 키워드를 먼저 검사하고, 없으면 재활용 키워드를 검사합니다.
        """
        for category, keywords in (
            (Category.ORGANIC, self.organic),
            (Category.RECYCLABLE, self.recyclable),
        ):
            for keyword in keywords:
                if keyword in label:
                    return category, keyword
        return None


DEFAULT_KEYWORDS = CategoryKeywordSet(
    organic=(
        # 과일 & 채소
        "banana", "apple", "orange", "fruit", "vegetable", "broccoli",
        "carrot", "cabbage", "lettuce", "corn", "pumpkin", "mushroom",
        "potato", "tomato", "eggplant", "citrus", "grape", "strawberry",
        "pineapple", "mango", "papaya", "onion", "garlic", "ginger", "lime",
        "lemon", "melon", "avocado", "chili",
        # 음식
        "bread", "sandwich", "salad", "pizza", "burger", "noodle", "pasta",
        "rice", "egg", "omelet", "omelette", "cake", "cookie",
    ),
    recyclable=(
        # 포장재 & 용기
        "bottle", "water bottle", "glass bottle", "wine bottle",
        "beer bottle", "can", "aluminum", "aluminium", "tin", "jar", "glass",
        "cup", "mug", "plate", "bowl",
        # 종이 & 골판지
        "paper", "newspaper", "magazine", "cardboard", "carton", "box",
        "packaging", "packet", "envelope", "book",
        # 금속 & 기타
        "metal", "steel", "iron", "copper", "wire", "cable", "screw", "bolt",
    ),
)


@dataclass(frozen=True)
class FilenameRule:
    """파일명 분류 규칙

    Attributes:
        key: 규칙 키 (organic, recyclable)
        keywords: 파일명 키워드
        base_confidence: 키워드가 하나 이상 매칭됐을 때의 기본 신뢰도
    """

    key: str
    keywords: tuple[str, ...]
    base_confidence: int


# 검사 순서가 곧 동점 처리 순서
FILENAME_RULES: tuple[FilenameRule, ...] = (
    FilenameRule(
        key="organic",
        keywords=(
            "fruit", "apple", "banana", "orange", "peel", "core", "scraps",
            "food", "vegetable", "carrot", "broccoli", "leaves", "compost",
            "kitchen", "leftover", "organic", "bio", "natural", "plant",
        ),
        base_confidence=85,
    ),
    FilenameRule(
        key="recyclable",
        keywords=(
            "bottle", "plastic", "glass", "metal", "can", "paper",
            "cardboard", "container", "jar", "aluminum", "pet",
            "recyclable", "clean", "dry",
        ),
        base_confidence=80,
    ),
)

GENERAL_CONFIDENCE = 40
KEYWORD_MATCH_BONUS = 15
MAX_FILENAME_CONFIDENCE = 95
MAX_PROPERTY_BONUS = 20

# 첫 번째 매칭 키워드 → 표시용 라벨
SMART_LABELS: dict[str, str] = {
    # Organic
    "fruit": "Fruit Waste",
    "apple": "Apple Core",
    "banana": "Banana Peel",
    "orange": "Orange Peel",
    "food": "Food Scraps",
    "vegetable": "Vegetable Waste",
    "leaves": "Leaf Waste",
    # Recyclable
    "bottle": "Plastic Bottle",
    "glass": "Glass Container",
    "metal": "Metal Item",
    "can": "Metal Can",
    "paper": "Paper Item",
    "cardboard": "Cardboard Box",
    "plastic": "Plastic Container",
}

CATEGORY_LABELS: dict[str, str] = {
    "organic": "Organic Waste",
    "recyclable": "Recyclable Item",
    "general": "General Waste",
}
