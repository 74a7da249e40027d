"""
App layer: 위키 웹 서버 (FastAPI + Jinja2).

역할:
- 라우트: /, /view, /edit, /save, /api/pages
- 설정 로드, 공유 객체(저장소, 템플릿, 버퍼 풀) 구성
- ⚠️ 파일 I/O 로직 없음 (core에 위임)

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML (layouts/ + 페이지별 include)
- data/ (루트) → 페이지 저장소 (<title>.txt)
"""
