"""Headlines screen state machine."""

import logging
from typing import Callable, List, Optional, Protocol

from ..errors import PresentationErrorMapper
from ..models import Article, LoadKind, ScreenState
from .debouncer import Debouncer
from .mapper import HeadlinesViewDataMapper
from .topics import Topic

logger = logging.getLogger(__name__)

StateCallback = Callable[[ScreenState], None]


class ArticleRepository(Protocol):
    """Data access the controller depends on, normally NewsRepository."""

    async def top_headlines(
        self, language: str, max_count: int, country: Optional[str] = None
    ) -> List[Article]: ...

    async def search(self, query: str, language: str, max_count: int) -> List[Article]: ...


class HeadlinesController:
    """
    Own the headlines screen state and coordinate loads.

    States move idle -> loading(initial) -> loaded | error, then
    loaded | error -> loading(refresh | search) -> loaded | error.
    Typed queries are debounced; refresh and the initial load run at once.
    Every fetch takes a sequence number and only the latest one may
    publish its result, so a superseded fetch is dropped without a
    state change.

    Not thread-safe: all calls must come from the event loop that runs it.
    """

    def __init__(
        self,
        repository: ArticleRepository,
        mapper: Optional[HeadlinesViewDataMapper] = None,
        error_mapper: Optional[PresentationErrorMapper] = None,
        language: str = "en",
        country: Optional[str] = None,
        max_articles: int = 50,
        debounce_seconds: float = 0.5,
    ) -> None:
        self.repository = repository
        self.mapper = mapper or HeadlinesViewDataMapper()
        self.error_mapper = error_mapper or PresentationErrorMapper()
        self.language = language
        self.country = country
        self.max_articles = max_articles
        self.query = ""

        self._state = ScreenState.idle()
        self._subscribers: List[StateCallback] = []
        self._sequence = 0
        self._debouncer = Debouncer(debounce_seconds)

    @property
    def state(self) -> ScreenState:
        return self._state

    @property
    def topics(self) -> List[Topic]:
        return list(Topic)

    @property
    def normalized_query(self) -> str:
        return self.query.strip().lower()

    @property
    def selected_topic(self) -> Optional[Topic]:
        return Topic.from_query(self.normalized_query)

    @property
    def empty_description_message(self) -> str:
        """Message shown when a load succeeds with no articles."""
        if not self.query:
            return "No news articles available at the moment."
        topic = self.selected_topic
        if topic is not None:
            return f"No articles found for '{topic.display_name}'."
        return f"No articles found for '{self.query}'."

    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        """Register ``callback`` for state changes; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _set_state(self, state: ScreenState) -> None:
        self._state = state
        logger.debug("State -> %s", state)
        for callback in list(self._subscribers):
            callback(state)

    async def load_initial_data(self) -> None:
        """Load top headlines once; ignored unless the screen is idle."""
        if not self._state.is_idle:
            return
        await self._perform_search("", LoadKind.INITIAL)

    async def refresh(self) -> None:
        """Re-run the fetch for the current query immediately. Also the retry action."""
        self._debouncer.cancel()
        await self._perform_search(self.query, LoadKind.REFRESH)

    def query_changed(self, text: str) -> None:
        """Store ``text`` and schedule a debounced search, replacing any pending one."""
        self.query = text
        self._debouncer.run(lambda: self._perform_search(text, LoadKind.SEARCH))

    def is_topic_selected(self, topic: Topic) -> bool:
        return self.normalized_query == topic.value

    def toggle_topic(self, topic: Topic) -> None:
        """Select ``topic`` as the query, or clear the query if already selected."""
        text = "" if self.is_topic_selected(topic) else topic.display_name
        self.query_changed(text)

    async def wait_for_pending(self) -> None:
        """Wait for a scheduled debounced search to run or be cancelled."""
        await self._debouncer.wait()

    async def aclose(self) -> None:
        """
        Cancel any pending debounced search and wait for it to unwind.

        Fetches still running afterwards are treated as superseded. Nothing
        is published once closed, so the last state stays as it was, which
        may be a loading state.
        """
        self._subscribers.clear()
        self._sequence += 1
        await self._debouncer.aclose()

    async def _perform_search(self, query: str, kind: LoadKind) -> None:
        self._sequence += 1
        sequence = self._sequence
        trimmed = query.strip()

        self._set_state(ScreenState.loading(kind))
        try:
            articles = await self._fetch_articles(trimmed)
        except Exception as e:
            if sequence != self._sequence:
                logger.debug("Dropping failure of superseded fetch #%d", sequence)
                return
            self._set_state(ScreenState.failed(self.error_mapper.map(e)))
            return

        if sequence != self._sequence:
            logger.debug("Dropping result of superseded fetch #%d", sequence)
            return
        self._set_state(ScreenState.loaded([self.mapper.map(a) for a in articles]))

    async def _fetch_articles(self, query: str) -> List[Article]:
        if not query:
            return await self.repository.top_headlines(
                language=self.language,
                max_count=self.max_articles,
                country=self.country,
            )
        return await self.repository.search(
            query, language=self.language, max_count=self.max_articles
        )
