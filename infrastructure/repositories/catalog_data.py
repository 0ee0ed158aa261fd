"""Reference catalog of hotels and review templates"""
from decimal import Decimal

from domain.entities import Hotel

HOTELS = [
    Hotel(
        id="hotel-1",
        name="グランド東京ホテル",
        description="東京の中心部に位置する豪華なホテルです。東京タワーやショッピングエリアへのアクセスも良好です。",
        address="東京都港区芝公園4-2-8",
        city="東京",
        country="日本",
        rating=4.7,
        review_count=1250,
        price=Decimal("25000"),
        currency="JPY",
        images=[
            "https://images.unsplash.com/photo-1566073771259-6a8506099945",
            "https://images.unsplash.com/photo-1582719508461-905c673771fd",
            "https://images.unsplash.com/photo-1578683010236-d716f9a3f461",
        ],
        amenities=["Wi-Fi", "プール", "スパ", "フィットネスセンター", "レストラン", "駐車場"],
        latitude=35.6585,
        longitude=139.7454,
    ),
    Hotel(
        id="hotel-2",
        name="京都トラディショナルイン",
        description="京都の伝統的な雰囲気を味わえる宿。有名な観光スポットへのアクセスも良好です。",
        address="京都府京都市東山区祇園町南側570-2",
        city="京都",
        country="日本",
        rating=4.9,
        review_count=890,
        price=Decimal("30000"),
        currency="JPY",
        images=[
            "https://images.unsplash.com/photo-1601053720380-0fa6b742cc89",
            "https://images.unsplash.com/photo-1545304773-9f2f0d6e2d10",
            "https://images.unsplash.com/photo-1545304773-9f2f0d6e2d10",
        ],
        amenities=["Wi-Fi", "温泉", "日本庭園", "伝統的な食事", "浴衣レンタル"],
        latitude=35.0035,
        longitude=135.7775,
    ),
    Hotel(
        id="hotel-3",
        name="大阪ビジネスホテル",
        description="大阪の中心部に位置するビジネスホテル。観光やビジネスに最適です。",
        address="大阪府大阪市中央区難波5-1-60",
        city="大阪",
        country="日本",
        rating=4.2,
        review_count=1560,
        price=Decimal("15000"),
        currency="JPY",
        images=[
            "https://images.unsplash.com/photo-1566073771259-6a8506099945",
            "https://images.unsplash.com/photo-1582719508461-905c673771fd",
            "https://images.unsplash.com/photo-1578683010236-d716f9a3f461",
        ],
        amenities=["Wi-Fi", "ビジネスセンター", "レストラン", "コンビニ"],
        latitude=34.6684,
        longitude=135.5022,
    ),
    Hotel(
        id="hotel-4",
        name="沖縄リゾートホテル",
        description="沖縄の美しいビーチに面したリゾートホテル。マリンアクティビティも充実しています。",
        address="沖縄県那覇市おもろまち4-11-1",
        city="沖縄",
        country="日本",
        rating=4.8,
        review_count=2100,
        price=Decimal("35000"),
        currency="JPY",
        images=[
            "https://images.unsplash.com/photo-1566073771259-6a8506099945",
            "https://images.unsplash.com/photo-1582719508461-905c673771fd",
            "https://images.unsplash.com/photo-1578683010236-d716f9a3f461",
        ],
        amenities=["Wi-Fi", "プール", "ビーチアクセス", "スパ", "マリンスポーツ", "レストラン"],
        latitude=26.2124,
        longitude=127.6809,
    ),
    Hotel(
        id="hotel-5",
        name="北海道スキーリゾート",
        description="北海道の雄大な自然に囲まれたスキーリゾート。冬はスキー、夏はトレッキングが楽しめます。",
        address="北海道虻田郡倶知安町字山田204",
        city="北海道",
        country="日本",
        rating=4.6,
        review_count=1800,
        price=Decimal("28000"),
        currency="JPY",
        images=[
            "https://images.unsplash.com/photo-1566073771259-6a8506099945",
            "https://images.unsplash.com/photo-1582719508461-905c673771fd",
            "https://images.unsplash.com/photo-1578683010236-d716f9a3f461",
        ],
        amenities=["Wi-Fi", "スキー場直結", "温泉", "レストラン", "スキーレンタル", "スキースクール"],
        latitude=42.8614,
        longitude=140.6982,
    ),
]

# (user_name, rating, comment, date)
REVIEW_TEMPLATES = [
    ("田中太郎", 4.5, "とても快適に過ごせました。スタッフの対応も良く、また利用したいです。", "2025-03-15"),
    ("鈴木花子", 5.0, "最高のホテルでした！部屋からの眺めも素晴らしく、設備も充実していました。", "2025-02-28"),
    ("佐藤健", 4.0, "全体的に満足しています。ただ、チェックイン時に少し時間がかかりました。", "2025-01-10"),
]
