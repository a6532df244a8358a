"""
기술 스택 카탈로그 모듈
=====================

추천기가 사용하는 고정 데이터입니다. 코드와 분리되어 있어 교체가 쉽습니다.

- TECH_ITEMS: 추천 후보 기술 목록. description은 임베딩 공간에서의 위치를
  잡기 위한 영문 키워드 묶음이며 사용자에게 보여주지 않습니다.
- KEYWORD_BRIDGE_RULES: 한국어 도메인 키워드 → 영문 키워드 묶음 (순서 유지)
- JS_ECOSYSTEM / TYPED_COMPANION: JavaScript 생태계 기술이 추천되면
  TypeScript를 함께 추천하는 보정 규칙용 데이터

버전: 1.0.0
"""

import re
from typing import List, Pattern, Tuple

from .models import TechItem

TECH_ITEMS: List[TechItem] = [
    # Frontend
    TechItem(name="React", description="web frontend UI component library SPA single page application interactive"),
    TechItem(name="Next.js", description="React fullstack framework SSR SSG server rendering web application"),
    TechItem(name="Vue", description="web frontend progressive framework reactive UI SPA"),
    TechItem(name="Nuxt", description="Vue fullstack framework SSR SSG server rendering"),
    TechItem(name="Svelte", description="web frontend compiler lightweight fast UI reactive"),
    TechItem(name="Angular", description="web frontend enterprise framework TypeScript large scale application"),
    TechItem(name="Tailwind CSS", description="CSS utility-first styling design system web frontend"),
    TechItem(name="TypeScript", description="typed JavaScript static analysis type safety programming language"),
    # Backend
    TechItem(name="Node.js", description="JavaScript server runtime backend API event-driven"),
    TechItem(name="Express", description="Node.js minimal web framework REST API backend server"),
    TechItem(name="Fastify", description="Node.js fast web framework high performance REST API backend"),
    TechItem(name="Hono", description="lightweight edge web framework fast API serverless realtime"),
    TechItem(name="Django", description="Python web framework full-featured admin ORM backend"),
    TechItem(name="FastAPI", description="Python async fast API framework OpenAPI automatic docs"),
    TechItem(name="Spring Boot", description="Java enterprise backend framework microservice large scale"),
    TechItem(name="Go", description="Go golang backend concurrent high performance systems programming"),
    TechItem(name="Rust", description="Rust systems programming performance safety backend low-level"),
    # Mobile
    TechItem(name="React Native", description="mobile app iOS Android cross-platform JavaScript React native"),
    TechItem(name="Expo", description="React Native development platform mobile app build deploy"),
    TechItem(name="Flutter", description="mobile app iOS Android cross-platform Dart Google widget UI"),
    TechItem(name="Swift", description="iOS Apple native mobile app development"),
    TechItem(name="Kotlin", description="Android native mobile app development JVM"),
    TechItem(name="Capacitor", description="hybrid mobile app web technology iOS Android wrapper"),
    # Database
    TechItem(name="PostgreSQL", description="relational database SQL ACID advanced query JSON"),
    TechItem(name="MySQL", description="relational database SQL popular web application"),
    TechItem(name="MongoDB", description="NoSQL document database flexible schema JSON"),
    TechItem(name="Redis", description="in-memory cache realtime pub/sub session fast data"),
    TechItem(name="SQLite", description="embedded lightweight database local file simple"),
    TechItem(name="Supabase", description="backend-as-a-service PostgreSQL realtime auth storage simple serverless"),
    TechItem(name="DynamoDB", description="AWS NoSQL serverless key-value scalable cloud database"),
    # Infra
    TechItem(name="Docker", description="container virtualization deployment packaging DevOps"),
    TechItem(name="Kubernetes", description="container orchestration scaling microservice cluster cloud"),
    TechItem(name="AWS", description="Amazon cloud infrastructure hosting scalable enterprise"),
    TechItem(name="GCP", description="Google cloud platform infrastructure machine learning AI"),
    TechItem(name="Vercel", description="frontend deployment serverless edge hosting Next.js simple"),
    TechItem(name="Netlify", description="frontend deployment JAMstack static hosting simple"),
    TechItem(name="Cloudflare", description="CDN edge network workers serverless security performance"),
]

# 한국어 키워드 → 영문 키워드 묶음. 매칭되는 모든 규칙이 표 순서대로 적용된다.
KEYWORD_BRIDGE_RULES: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"웹\s*(사이트|앱|어플|페이지)?"), "web application website"),
    (re.compile(r"모바일|핸드폰"), "mobile app"),
    (re.compile(r"앱"), "app application"),
    (re.compile(r"ios|아이폰", re.IGNORECASE), "iOS Apple mobile native"),
    (re.compile(r"android|안드로이드", re.IGNORECASE), "Android mobile native"),
    (re.compile(r"프론트(엔드)?"), "frontend UI web"),
    (re.compile(r"백엔드|서버"), "backend server API"),
    (re.compile(r"실시간"), "realtime websocket live"),
    (re.compile(r"채팅|메신저"), "chat messaging realtime communication"),
    (re.compile(r"대시보드"), "dashboard analytics chart visualization"),
    (re.compile(r"쇼핑|커머스|결제"), "e-commerce shopping payment store"),
    (re.compile(r"블로그|게시판|글"), "blog CMS content board"),
    (re.compile(r"인증|로그인|회원"), "authentication login user auth"),
    (re.compile(r"관리자|어드민"), "admin management panel"),
    (re.compile(r"AI|인공지능|챗봇|추천", re.IGNORECASE), "AI machine learning chatbot recommendation LLM"),
    (re.compile(r"데이터|분석"), "data analytics database"),
    (re.compile(r"이미지|사진|갤러리"), "image photo gallery upload media"),
    (re.compile(r"영상|비디오|스트리밍"), "video streaming media player"),
    (re.compile(r"지도|위치|GPS"), "map location GPS geolocation"),
    (re.compile(r"알림|푸시|노티"), "notification push alert realtime"),
    (re.compile(r"게임"), "game interactive realtime graphics"),
    (re.compile(r"협업|공유|팀"), "collaboration team sharing realtime sync"),
    (re.compile(r"에디터|편집"), "editor editing rich text document"),
    (re.compile(r"검색"), "search engine indexing filter"),
    (re.compile(r"소셜|SNS|피드"), "social network feed timeline community"),
    (re.compile(r"예약|스케줄|캘린더"), "booking schedule calendar appointment"),
    (re.compile(r"설문|투표|폼"), "form survey poll input"),
    (re.compile(r"파일|업로드|저장"), "file upload storage cloud"),
    (re.compile(r"간단|심플|가벼운"), "simple lightweight minimal"),
    (re.compile(r"대규모|엔터프라이즈"), "enterprise large scale production"),
]

JS_ECOSYSTEM = frozenset([
    "React", "Next.js", "Vue", "Nuxt", "Svelte",
    "Node.js", "Express", "Fastify", "Hono",
    "React Native", "Expo",
])

TYPED_COMPANION = "TypeScript"
