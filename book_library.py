"""
Book Library Patterns
=====================

Core Design: A small book library that hands out copies of template books,
keeps a collection that announces every change, and prints book details
through an adapted printer.

Design Patterns & Strategies Used:
1. Prototype Pattern - Book cache returns independent clones of templates
2. Adapter Pattern - Narrow printer interface over a detailed printer
3. Observer Pattern - Library notifies listeners on add/remove

Features:
- Template registry with fail-fast lookup
- Explicit per-book cloning (no shared state between copies)
- Synchronous, ordered change notifications
- Detailed book printing behind a simple interface
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

LOG = logging.getLogger(__name__)


class BookGenre(Enum):
    FICTION = "Fiction Book"
    SCIENCE = "Science Book"


_READ_MESSAGES: Dict[BookGenre, str] = {
    BookGenre.FICTION: "Reading a Fiction Book",
    BookGenre.SCIENCE: "Reading a Science Book",
}

# Templates loaded into the cache, keyed by book id
SEED_BOOKS: Dict[str, BookGenre] = {
    "1": BookGenre.FICTION,
    "2": BookGenre.SCIENCE,
}


class LibraryEvent(Enum):
    ADDED = "ADDED"
    REMOVED = "REMOVED"


# ==================== ERRORS ====================

class LibraryError(Exception):
    """Base error for the book library"""


class BookNotFoundError(LibraryError, KeyError):
    """Raised when a book id is unknown or a book is not in the library"""

    def __init__(self, book_id: Optional[str], title: Optional[str] = None):
        super().__init__(book_id)
        self.book_id = book_id
        self.title = title

    def __str__(self):
        if self.title:
            return f"Book not found: {self.title} (id {self.book_id})"
        return f"Book not found: {self.book_id}"


class CloneError(LibraryError):
    """Raised when a template cannot be copied into an independent book"""

    def __init__(self, book_id: str):
        super().__init__(f"Could not clone book {book_id}")
        self.book_id = book_id


# ==================== PROTOTYPE PATTERN ====================
# Cached templates are never handed out, only copies of them

@dataclass
class Book:
    """Book entity; the title is fixed by the genre"""
    genre: BookGenre
    book_id: Optional[str] = None

    def __setattr__(self, name, value):
        # Only the id may change once the genre is set
        if name == "genre" and "genre" in self.__dict__:
            raise AttributeError("genre cannot be changed after construction")
        super().__setattr__(name, value)

    @property
    def title(self) -> str:
        return self.genre.value

    def read(self):
        print(_READ_MESSAGES[self.genre])

    def clone(self) -> 'Book':
        """Copy every field into a new book"""
        return Book(genre=self.genre, book_id=self.book_id)


class BookCache:
    """Registry of template books keyed by id"""

    def __init__(self):
        self._books: Dict[str, Book] = {}

    def load(self):
        """Seed the cache with the template books"""
        for book_id, genre in SEED_BOOKS.items():
            book = Book(genre=genre)
            book.book_id = book_id
            self._books[book.book_id] = book
        LOG.debug("Loaded %d template books", len(self._books))

    def get(self, book_id: str) -> Book:
        """Return an independent copy of the template stored under book_id"""
        template = self._books.get(book_id)
        if template is None:
            raise BookNotFoundError(book_id)

        clone = template.clone()
        if clone is template or clone != template:
            raise CloneError(book_id)
        LOG.debug("Cloned book %s (%s)", book_id, template.title)
        return clone

    def ids(self) -> Tuple[str, ...]:
        return tuple(self._books)


# ==================== ADAPTER PATTERN ====================

class BookPrinter(ABC):
    """Target interface expected by clients"""

    @abstractmethod
    def print_book(self, book: Book):
        pass


class DetailedBookPrinter:
    """Existing printer with a different interface"""

    def print_detailed(self, book: Book):
        print(f"Book ID: {book.book_id}")
        print(f"Book Title: {book.title}")


class PrinterAdapter(BookPrinter):
    """Exposes DetailedBookPrinter as a BookPrinter"""

    def __init__(self, detailed_printer: Optional[DetailedBookPrinter] = None):
        self.detailed_printer = detailed_printer or DetailedBookPrinter()

    def print_book(self, book: Book):
        self.detailed_printer.print_detailed(book)


# ==================== OBSERVER PATTERN ====================

class Observer(ABC):
    """Observer interface for library changes"""

    @abstractmethod
    def update(self, event: LibraryEvent, book: Book):
        pass


class Library:
    """Subject - holds books and notifies observers on every change"""

    def __init__(self):
        self._books: List[Book] = []
        self._observers: List[Observer] = []

    def attach(self, observer: Observer):
        """Attach an observer"""
        if observer not in self._observers:
            self._observers.append(observer)
            LOG.debug("Attached observer %r", observer)

    def detach(self, observer: Observer):
        """Detach an observer"""
        if observer in self._observers:
            self._observers.remove(observer)
            LOG.debug("Detached observer %r", observer)

    def add(self, book: Book):
        self._books.append(book)
        self.notify(LibraryEvent.ADDED, book)

    def remove(self, book: Book):
        """Remove the first book equal to the given one"""
        if book not in self._books:
            raise BookNotFoundError(book.book_id, book.title)
        self._books.remove(book)
        self.notify(LibraryEvent.REMOVED, book)

    def list(self) -> Tuple[Book, ...]:
        return tuple(self._books)

    def notify(self, event: LibraryEvent, book: Book):
        """Notify all observers, in attachment order"""
        LOG.debug("Notifying %d observer(s) of %s %s",
                  len(self._observers), event.value, book.book_id)
        for observer in list(self._observers):
            observer.update(event, book)


class LibraryObserver(Observer):
    """Concrete Observer - prints the current books after each change"""

    def __init__(self, library: Library):
        self.library = library

    def update(self, event: LibraryEvent, book: Book):
        print("Library has been updated. Current books:")
        for current in self.library.list():
            print(f" - {current.title}")


# ==================== DEMONSTRATION ====================

def run_demo():
    """Clone two books, collect them in a library and print their details"""
    cache = BookCache()
    cache.load()

    cloned_fiction = cache.get("1")
    print(f"Book: {cloned_fiction.title}")
    cloned_fiction.read()

    cloned_science = cache.get("2")
    print(f"Book: {cloned_science.title}")
    cloned_science.read()

    library = Library()
    library.attach(LibraryObserver(library))

    library.add(cloned_fiction)
    library.add(cloned_science)

    printer: BookPrinter = PrinterAdapter()
    print("Detailed book information:")
    for book in library.list():
        printer.print_book(book)


def main():
    print("=" * 60)
    print("BOOK LIBRARY PATTERNS DEMONSTRATION")
    print("=" * 60)
    print()

    run_demo()

    print()
    print("=" * 60)
    print("DESIGN PATTERNS:")
    print("=" * 60)
    print("1. Prototype Pattern - Book cache hands out clones")
    print("2. Observer Pattern - Library change notifications")
    print("3. Adapter Pattern - Detailed printer behind BookPrinter")
    print("=" * 60)


if __name__ == "__main__":
    main()
