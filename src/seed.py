"""
Seed script to populate the database with the default category.

Creates the default "Genel Kelimeler" category with 70 words (10 for each
length from 4 to 10 letters) and the default application settings.
Seeding is skipped when a default category already exists.

Usage:
    python -m src.seed          # create tables and seed
    python -m src.seed clear    # delete all data
    python -m src.seed reset    # keep only the empty default category and default settings
"""

import asyncio

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.categories.models import Category
from src.database import async_session_maker, init_db, unit_of_work
from src.history.models import GameHistory
from src.logging_config import get_logger, setup_logging
from src.settings.models import Setting
from src.settings.service import DEFAULT_SETTINGS, reset_all_data
from src.words.models import Word
from src.words.service import LETTER_BUCKETS, letter_count

logger = get_logger(__name__)


# ========== SEED DATA ==========

DEFAULT_CATEGORY = {
    "name": "Genel Kelimeler",
    "emoji": "📦",
    "description": "Günlük yaşamda sık kullanılan genel kelimeler - İngilizce öğrenimi için temel kelimeler",
}

DEFAULT_WORDS = [
    ("BOOK", "Kitap - okumak için kullanılan basılı eser"),
    ("GAME", "Oyun - eğlence amaçlı oynanan aktivite"),
    ("TIME", "Zaman - olayların sırası ve süresi"),
    ("LOVE", "Sevgi, aşk - güçlü duygusal bağ"),
    ("MEAL", "Öğün - sabah, öğle veya akşam yemeği"),
    ("ROAD", "Yol - araçların ve insanların geçtiği güzergah"),
    ("COLD", "Soğuk - düşük sıcaklık"),
    ("WORD", "Kelime - anlamlı harf grubu"),
    ("ROOM", "Oda - binanın bir bölümü"),
    ("RAIN", "Yağmur - gökten düşen su damlacıkları"),
    ("DANCE", "Dans etmek - müzik eşliğinde yapılan hareketler"),
    ("WATCH", "İzlemek / saat - görmek veya zaman ölçen cihaz"),
    ("STUDY", "Ders çalışmak - öğrenmek için araştırma yapmak"),
    ("BREAD", "Ekmek - un, su ve mayadan yapılan besin"),
    ("MUSIC", "Müzik - seslerden oluşan sanat dalı"),
    ("DREAM", "Hayal / rüya - uykuda görülen olaylar"),
    ("APPLE", "Elma - meyvesi yenen ağaç"),
    ("CHAIR", "Sandalye - oturmak için kullanılan mobilya"),
    ("SPORT", "Spor - fiziksel aktivite ve yarışma"),
    ("WATER", "Su - canlılar için hayati sıvı"),
    ("SCHOOL", "Okul - öğrencilerin eğitim gördüğü kurum"),
    ("TRAVEL", "Seyahat etmek - bir yerden başka bir yere gitmek"),
    ("NATURE", "Doğa - canlılar ve çevrenin bütünü"),
    ("ANIMAL", "Hayvan - insanlar dışındaki canlılar"),
    ("MOTHER", "Anne - çocuğu doğuran kadın"),
    ("FATHER", "Baba - çocuğun erkek ebeveyni"),
    ("FRIEND", "Arkadaş - yakın dost, ahbap"),
    ("FAMILY", "Aile - anne, baba ve çocukların oluşturduğu topluluk"),
    ("SUMMER", "Yaz mevsimi - yılın en sıcak dönemi"),
    ("WINTER", "Kış mevsimi - yılın en soğuk dönemi"),
    ("SUBJECT", "Ders - okul müfredatında yer alan konu"),
    ("CULTURE", "Kültür - toplumun yaşam biçimi ve değerleri"),
    ("TEACHER", "Öğretmen - eğitim veren kişi"),
    ("STUDENT", "Öğrenci - eğitim alan kişi"),
    ("COUNTRY", "Ülke - sınırları belli olan coğrafi bölge"),
    ("HOLIDAY", "Tatil - dinlenme ve eğlence dönemi"),
    ("PICTURE", "Resim - görsel sanat eseri"),
    ("PROJECT", "Proje - planlanan ve yürütülen iş"),
    ("LIBRARY", "Kütüphane - kitapların toplandığı yer"),
    ("MORNING", "Sabah - günün ilk saatleri"),
    ("LANGUAGE", "Dil - iletişim aracı, konuşma sistemi"),
    ("HOMEWORK", "Ödev - evde yapılan ders çalışması"),
    ("HOSPITAL", "Hastane - hastaların tedavi edildiği kurum"),
    ("EXERCISE", "Egzersiz - fiziksel veya zihinsel çalışma"),
    ("COMPUTER", "Bilgisayar - elektronik hesaplama ve veri işleme cihazı"),
    ("BUILDING", "Bina - insanların yaşadığı veya çalıştığı yapı"),
    ("LEARNING", "Öğrenme - bilgi ve beceri edinme süreci"),
    ("QUESTION", "Soru - bilgi almak için sorulan cümle"),
    ("SUNSHINE", "Güneş ışığı - güneşten gelen aydınlatma"),
    ("NOTEBOOK", "Defter - yazı yazmak için kullanılan kağıt demeti"),
    ("VOLUNTEER", "Gönüllü - karşılıksız yardım eden kişi"),
    ("INTERVIEW", "Röportaj / mülakat - soru-cevap görüşmesi"),
    ("EDUCATION", "Eğitim - öğretim ve öğrenme süreci"),
    ("ADVENTURE", "Macera - heyecan verici deneyim"),
    ("YESTERDAY", "Dün - bugünden bir gün önce"),
    ("AFTERNOON", "Öğleden sonra - öğle ile akşam arası"),
    ("DANGEROUS", "Tehlikeli - risk içeren, zararlı olabilecek"),
    ("APARTMENT", "Daire - büyük binanın içindeki konut"),
    ("KNOWLEDGE", "Bilgi - öğrenilen ve bilinen şeyler"),
    ("CAREFULLY", "Dikkatlice - özenli ve dikkatli bir şekilde"),
    ("TECHNOLOGY", "Teknoloji - bilimsel gelişmeler ve uygulamalar"),
    ("TELEVISION", "Televizyon - görüntülü yayın cihazı"),
    ("DICTIONARY", "Sözlük - kelimelerin anlamlarını açıklayan kitap"),
    ("POPULATION", "Nüfus - bir bölgede yaşayan insan sayısı"),
    ("DIFFERENCE", "Fark - iki şey arasındaki ayrım"),
    ("UNIVERSITY", "Üniversite - yüksek öğretim kurumu"),
    ("IMPORTANCE", "Önem - bir şeyin değeri ve anlamlılığı"),
    ("SMARTPHONE", "Akıllı telefon - internet bağlantılı mobil cihaz"),
    ("GOVERNMENT", "Hükümet - ülkeyi yöneten resmi kurum"),
    ("BASKETBALL", "Basketbol - potaya top atma sporu"),
]


async def is_database_seeded(session: AsyncSession) -> bool:
    """The database is seeded once a default category exists."""
    result = await session.execute(select(Category.id).where(Category.is_default.is_(True)).limit(1))
    return result.scalar_one_or_none() is not None


async def seed_database(session: AsyncSession) -> bool:
    """
    Insert the default category, its words and the default settings.

    Runs in a single transaction. Returns False when the database was
    already seeded.
    """
    if await is_database_seeded(session):
        logger.info("📦 Database already seeded, skipping")
        return False

    logger.info("🌱 Seeding database with default data...")

    async with unit_of_work(session):
        category = Category(is_default=True, **DEFAULT_CATEGORY)
        session.add(category)
        await session.flush()

        session.add_all([
            Word(category_id=category.id, word=text, letter_count=letter_count(text), hint=hint)
            for text, hint in DEFAULT_WORDS
        ])

        for key, value in DEFAULT_SETTINGS.items():
            await session.merge(Setting(key=key, value=value))

    logger.info(f"✅ Created default category {category.id} with {len(DEFAULT_WORDS)} words")
    return True


def default_word_distribution() -> dict[int, int]:
    """Words per letter bucket in the seed data."""
    counts = {bucket: 0 for bucket in LETTER_BUCKETS}
    for text, _ in DEFAULT_WORDS:
        counts[letter_count(text)] += 1
    return counts


async def clear_database(session: AsyncSession) -> None:
    """Delete all history, words, categories and settings."""
    async with unit_of_work(session):
        await session.execute(delete(GameHistory))
        await session.execute(delete(Word))
        await session.execute(delete(Category))
        await session.execute(delete(Setting))
    logger.info("🗑️ Database cleared")


async def main(command: str = "seed") -> None:
    await init_db()
    async with async_session_maker() as session:
        if command == "clear":
            await clear_database(session)
        elif command == "reset":
            await reset_all_data(session)
        else:
            await seed_database(session)


if __name__ == "__main__":
    import sys

    setup_logging()
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "seed"))
