"""
Seed fixtures loaded into a fresh store.
"""

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .memory_store import MemoryStore

DEMO_USERNAME = "demo"

_IMAGE = "https://images.unsplash.com/{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=400"

# (title, content, summary, source_url, source_name, category, image, duration, read_time, age_minutes)
SAMPLE_ARTICLES = [
    (
        "OpenAI Announces Revolutionary Language Model with Enhanced Reasoning",
        "OpenAI has unveiled its latest breakthrough in artificial intelligence with the release of a new language model that demonstrates unprecedented reasoning capabilities. The model, which has been in development for over two years, shows remarkable improvements in logical thinking, mathematical problem-solving, and complex decision-making processes. This advancement represents a significant leap forward in AI technology, potentially transforming industries from healthcare to finance.",
        "The latest AI breakthrough promises to transform how we interact with artificial intelligence, featuring improved logical reasoning and multilingual capabilities...",
        "https://techcrunch.com/ai-breakthrough", "TechCrunch", "Technology",
        "photo-1677442136019-21780ecad995", 240, 4, 120,
    ),
    (
        "Global Markets Rally as Tech Stocks Lead Recovery",
        "Major indices surged following positive earnings reports from technology giants, with the NASDAQ posting its best day in six months. Apple, Microsoft, and Google all exceeded analyst expectations, driving broader market optimism. The rally comes amid growing confidence in the tech sector's resilience and innovation capabilities.",
        "Major indices surge following positive earnings reports from technology giants, with analysts predicting continued growth through Q4...",
        "https://bloomberg.com/markets-rally", "Bloomberg", "Business",
        "photo-1559526324-4b87b5e36e44", 180, 3, 60,
    ),
    (
        "Breakthrough Gene Therapy Shows Promise for Rare Diseases",
        "Clinical trials demonstrate significant improvement in patients with inherited genetic disorders, offering hope for thousands of families worldwide. The therapy uses advanced CRISPR technology to correct genetic mutations at the cellular level, showing remarkable success rates in early-stage trials.",
        "Clinical trials demonstrate significant improvement in patients with inherited genetic disorders, offering hope for thousands of families...",
        "https://nature.com/gene-therapy", "Nature Medicine", "Health",
        "photo-1582719471384-894fbb16e074", 360, 6, 180,
    ),
    (
        "NASA's James Webb Telescope Discovers Ancient Galaxy Formation",
        "The James Webb Space Telescope has captured images of galaxy formation from over 13 billion years ago, providing unprecedented insights into the early universe. These observations challenge existing theories about cosmic evolution and offer new understanding of how the first galaxies formed after the Big Bang.",
        "Webb telescope reveals galaxy formation from 13 billion years ago, challenging current cosmic evolution theories...",
        "https://nasa.gov/webb-discovery", "NASA", "Science",
        "photo-1446776653964-20c1d3a81b06", 300, 5, 240,
    ),
    (
        "World Cup Final Breaks Global Viewership Records",
        "The FIFA World Cup final attracted over 1.5 billion viewers worldwide, setting new records for sports broadcasting. The thrilling match went to penalties, keeping audiences on the edge of their seats for over two hours. Social media engagement reached unprecedented levels during the event.",
        "World Cup final attracts record 1.5 billion viewers, becoming most-watched sporting event in history...",
        "https://fifa.com/worldcup-final", "FIFA", "Sports",
        "photo-1551698618-1dfe5d97d256", 220, 4, 300,
    ),
    (
        "Climate Summit Reaches Historic Agreement on Carbon Emissions",
        "World leaders at COP29 have reached a landmark agreement to reduce global carbon emissions by 50% within the next decade. The accord includes binding commitments from 195 countries and establishes a $500 billion fund for clean energy transition in developing nations.",
        "COP29 climate summit produces historic agreement with 50% emission reduction target and $500B clean energy fund...",
        "https://un.org/cop29-agreement", "United Nations", "Breaking",
        "photo-1569163139394-de44aa904459", 280, 5, 30,
    ),
    (
        "Major Breakthrough in Quantum Computing Achieved",
        "Researchers at MIT have successfully demonstrated quantum error correction at scale, bringing practical quantum computing significantly closer to reality. The breakthrough solves one of the most persistent challenges in quantum technology and could revolutionize computing within the next decade.",
        "MIT achieves quantum error correction breakthrough, bringing practical quantum computing closer to reality...",
        "https://mit.edu/quantum-breakthrough", "MIT Technology Review", "Technology",
        "photo-1635070041078-e363dbe005cb", 320, 6, 360,
    ),
    (
        "Hollywood Strike Ends with Groundbreaking AI Usage Agreement",
        "The entertainment industry reaches a historic deal regarding AI use in film and television production. The agreement establishes new guidelines for AI-generated content while protecting actors' rights and establishing fair compensation structures for AI-assisted productions.",
        "Entertainment industry reaches historic AI usage agreement, ending months-long strike with new protection guidelines...",
        "https://variety.com/hollywood-ai-agreement", "Variety", "Entertainment",
        "photo-1489599540877-b75e7b3e4522", 260, 4, 420,
    ),
    (
        "Revolutionary Cancer Treatment Shows 95% Success Rate",
        "A new immunotherapy treatment for aggressive forms of cancer has shown remarkable success in Phase III trials, with 95% of patients showing complete remission. The treatment combines cutting-edge gene therapy with personalized medicine approaches.",
        "New immunotherapy treatment achieves 95% success rate in cancer trials, offering hope for aggressive forms...",
        "https://nejm.org/cancer-breakthrough", "New England Journal of Medicine", "Health",
        "photo-1559757175-0eb30cd8c063", 340, 6, 480,
    ),
    (
        "Major Political Reform Bill Passes with Bipartisan Support",
        "Congress passes comprehensive electoral reform legislation with overwhelming bipartisan support, addressing voting rights, campaign finance, and redistricting. The bill represents the most significant political reform in decades and aims to strengthen democratic institutions.",
        "Congress passes major electoral reform bill with bipartisan support, addressing voting rights and campaign finance...",
        "https://politico.com/reform-bill", "Politico", "Politics",
        "photo-1529107386315-e1a2ed48a620", 290, 5, 540,
    ),
    (
        "Electric Vehicle Sales Surpass Traditional Cars for First Time",
        "Electric vehicle sales have officially surpassed traditional gasoline-powered cars in global markets for the first time in automotive history. This milestone represents a fundamental shift in consumer preferences and accelerating adoption of sustainable transportation.",
        "EV sales surpass traditional car sales globally for first time, marking historic shift in automotive industry...",
        "https://automotive-news.com/ev-milestone", "Automotive News", "Business",
        "photo-1593941707882-a5bac6861d75", 200, 4, 600,
    ),
    (
        "Mars Mission Reveals Evidence of Ancient Microbial Life",
        "NASA's Perseverance rover has discovered compelling evidence of ancient microbial life on Mars, marking one of the most significant scientific discoveries in human history. The findings suggest that Mars once hosted conditions suitable for life and may have implications for understanding life's origin in the universe.",
        "NASA rover discovers evidence of ancient microbial life on Mars, marking historic scientific breakthrough...",
        "https://nasa.gov/mars-life-discovery", "NASA", "Science",
        "photo-1614728263952-84ea256f9679", 380, 7, 660,
    ),
]

SAMPLE_FAVORITES = [1, 3, 6]

# (article_id, progress_seconds, completed)
SAMPLE_HISTORY = [
    (1, 120, False),
    (2, 180, True),
    (3, 95, False),
    (4, 300, True),
    (5, 40, False),
]

_SQUARE_IMAGE = "https://images.unsplash.com/{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=400"


def seed(store: "MemoryStore", now: datetime | None = None) -> None:
    """Load the demo user, articles, library and media fixtures."""
    now = now or datetime.now()

    demo = store.create_user(username=DEMO_USERNAME, password="password")

    for (title, content, summary, source_url, source_name, category,
         image, duration, read_time, age_minutes) in SAMPLE_ARTICLES:
        store.create_article(
            title=title,
            content=content,
            summary=summary,
            source_url=source_url,
            source_name=source_name,
            category=category,
            image_url=_IMAGE.format(image),
            duration=duration,
            read_time=read_time,
            published_at=now - timedelta(minutes=age_minutes),
        )

    for article_id in SAMPLE_FAVORITES:
        store.add_favorite(user_id=demo.id, article_id=article_id)

    for index, (article_id, progress, completed) in enumerate(SAMPLE_HISTORY):
        store.update_progress(
            user_id=demo.id,
            article_id=article_id,
            progress=progress,
            completed=completed,
            listened_at=now - timedelta(hours=index + 1),
        )

    store.create_podcast(
        title="Tech Talk Daily",
        description="Daily insights into the latest technology trends and breakthroughs",
        feed_url="https://feeds.example.com/tech-talk-daily",
        image_url=_SQUARE_IMAGE.format("photo-1478737270239-2f02b77fc618"),
        category="Technology",
    )
    store.create_podcast(
        title="Health & Wellness Today",
        description="Expert advice on health, wellness, and medical breakthroughs",
        feed_url="https://feeds.example.com/health-wellness",
        image_url=_SQUARE_IMAGE.format("photo-1559757148-5c350d0d3c56"),
        category="Health",
    )

    store.create_live_stream(
        title="Breaking News Live",
        description="24/7 breaking news coverage",
        stream_url="https://stream.example.com/breaking-news",
        category="Breaking",
        is_live=True,
        listeners=1250,
        image_url=_SQUARE_IMAGE.format("photo-1504711434969-e33886168f5c"),
    )
    store.create_live_stream(
        title="Tech News Radio",
        description="Live technology news and discussions",
        stream_url="https://stream.example.com/tech-radio",
        category="Technology",
        is_live=True,
        listeners=890,
        image_url=_SQUARE_IMAGE.format("photo-1518709268805-4e9042af2176"),
    )
