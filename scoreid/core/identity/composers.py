"""Static composer reference data.

``COMPOSER_CANONICAL_NAMES`` maps known surface variants (lowercase) to the
canonical display name. To add a composer, add the canonical name as the value
and every known variant, abbreviation and common misspelling as keys.
"""

from __future__ import annotations

import re
from types import MappingProxyType

_COMPOSER_VARIANTS: dict[str, str] = {
    # Baroque
    "bach": "Johann Sebastian Bach",
    "j.s. bach": "Johann Sebastian Bach",
    "js bach": "Johann Sebastian Bach",
    "j s bach": "Johann Sebastian Bach",
    "johann sebastian bach": "Johann Sebastian Bach",
    "bach, johann sebastian": "Johann Sebastian Bach",
    "bach, j.s.": "Johann Sebastian Bach",
    "bach js": "Johann Sebastian Bach",
    "jean-sébastien bach": "Johann Sebastian Bach",
    "c.p.e. bach": "Carl Philipp Emanuel Bach",
    "cpe bach": "Carl Philipp Emanuel Bach",
    "carl philipp emanuel bach": "Carl Philipp Emanuel Bach",
    "bach, c.p.e.": "Carl Philipp Emanuel Bach",
    "j.c. bach": "Johann Christian Bach",
    "jc bach": "Johann Christian Bach",
    "johann christian bach": "Johann Christian Bach",
    "handel": "George Frideric Handel",
    "händel": "George Frideric Handel",
    "g.f. handel": "George Frideric Handel",
    "gf handel": "George Frideric Handel",
    "george frideric handel": "George Frideric Handel",
    "georg friedrich händel": "George Frideric Handel",
    "handel, george frideric": "George Frideric Handel",
    "vivaldi": "Antonio Vivaldi",
    "a. vivaldi": "Antonio Vivaldi",
    "antonio vivaldi": "Antonio Vivaldi",
    "vivaldi, antonio": "Antonio Vivaldi",
    "scarlatti": "Domenico Scarlatti",
    "d. scarlatti": "Domenico Scarlatti",
    "domenico scarlatti": "Domenico Scarlatti",
    "scarlatti, domenico": "Domenico Scarlatti",
    "purcell": "Henry Purcell",
    "h. purcell": "Henry Purcell",
    "henry purcell": "Henry Purcell",
    "rameau": "Jean-Philippe Rameau",
    "j.p. rameau": "Jean-Philippe Rameau",
    "jean-philippe rameau": "Jean-Philippe Rameau",
    "telemann": "Georg Philipp Telemann",
    "g.p. telemann": "Georg Philipp Telemann",
    "georg philipp telemann": "Georg Philipp Telemann",
    # Classical
    "mozart": "Wolfgang Amadeus Mozart",
    "w.a. mozart": "Wolfgang Amadeus Mozart",
    "wa mozart": "Wolfgang Amadeus Mozart",
    "wolfgang amadeus mozart": "Wolfgang Amadeus Mozart",
    "mozart, wolfgang amadeus": "Wolfgang Amadeus Mozart",
    "wolfgang mozart": "Wolfgang Amadeus Mozart",
    "beethoven": "Ludwig van Beethoven",
    "l. beethoven": "Ludwig van Beethoven",
    "l.v. beethoven": "Ludwig van Beethoven",
    "lv beethoven": "Ludwig van Beethoven",
    "ludwig van beethoven": "Ludwig van Beethoven",
    "beethoven, ludwig van": "Ludwig van Beethoven",
    "ludwig beethoven": "Ludwig van Beethoven",
    "haydn": "Joseph Haydn",
    "j. haydn": "Joseph Haydn",
    "joseph haydn": "Joseph Haydn",
    "haydn, joseph": "Joseph Haydn",
    "franz joseph haydn": "Joseph Haydn",
    "clementi": "Muzio Clementi",
    "m. clementi": "Muzio Clementi",
    "muzio clementi": "Muzio Clementi",
    # Romantic
    "chopin": "Frédéric Chopin",
    "frederic chopin": "Frédéric Chopin",
    "frédéric chopin": "Frédéric Chopin",
    "f. chopin": "Frédéric Chopin",
    "chopin, frédéric": "Frédéric Chopin",
    "fryderyk chopin": "Frédéric Chopin",
    "liszt": "Franz Liszt",
    "f. liszt": "Franz Liszt",
    "franz liszt": "Franz Liszt",
    "liszt, franz": "Franz Liszt",
    "liszt ferenc": "Franz Liszt",
    "brahms": "Johannes Brahms",
    "j. brahms": "Johannes Brahms",
    "johannes brahms": "Johannes Brahms",
    "brahms, johannes": "Johannes Brahms",
    "schumann": "Robert Schumann",
    "r. schumann": "Robert Schumann",
    "robert schumann": "Robert Schumann",
    "schumann, robert": "Robert Schumann",
    "clara schumann": "Clara Schumann",
    "c. schumann": "Clara Schumann",
    "schumann, clara": "Clara Schumann",
    "schubert": "Franz Schubert",
    "f. schubert": "Franz Schubert",
    "franz schubert": "Franz Schubert",
    "schubert, franz": "Franz Schubert",
    "mendelssohn": "Felix Mendelssohn",
    "f. mendelssohn": "Felix Mendelssohn",
    "felix mendelssohn": "Felix Mendelssohn",
    "mendelssohn, felix": "Felix Mendelssohn",
    "mendelssohn-bartholdy": "Felix Mendelssohn",
    "felix mendelssohn-bartholdy": "Felix Mendelssohn",
    "rachmaninoff": "Sergei Rachmaninoff",
    "rachmaninov": "Sergei Rachmaninoff",
    "s. rachmaninoff": "Sergei Rachmaninoff",
    "s. rachmaninov": "Sergei Rachmaninoff",
    "sergei rachmaninoff": "Sergei Rachmaninoff",
    "sergey rachmaninov": "Sergei Rachmaninoff",
    "rachmaninoff, sergei": "Sergei Rachmaninoff",
    "рахманинов": "Sergei Rachmaninoff",
    "tchaikovsky": "Pyotr Ilyich Tchaikovsky",
    "tschaikowsky": "Pyotr Ilyich Tchaikovsky",
    "čajkovskij": "Pyotr Ilyich Tchaikovsky",
    "p.i. tchaikovsky": "Pyotr Ilyich Tchaikovsky",
    "pi tchaikovsky": "Pyotr Ilyich Tchaikovsky",
    "pyotr ilyich tchaikovsky": "Pyotr Ilyich Tchaikovsky",
    "tchaikovsky, pyotr ilyich": "Pyotr Ilyich Tchaikovsky",
    "чайковский": "Pyotr Ilyich Tchaikovsky",
    "wagner": "Richard Wagner",
    "r. wagner": "Richard Wagner",
    "richard wagner": "Richard Wagner",
    "wagner, richard": "Richard Wagner",
    "verdi": "Giuseppe Verdi",
    "g. verdi": "Giuseppe Verdi",
    "giuseppe verdi": "Giuseppe Verdi",
    "verdi, giuseppe": "Giuseppe Verdi",
    "puccini": "Giacomo Puccini",
    "g. puccini": "Giacomo Puccini",
    "giacomo puccini": "Giacomo Puccini",
    "puccini, giacomo": "Giacomo Puccini",
    "grieg": "Edvard Grieg",
    "e. grieg": "Edvard Grieg",
    "edvard grieg": "Edvard Grieg",
    "grieg, edvard": "Edvard Grieg",
    "dvorak": "Antonín Dvořák",
    "dvořák": "Antonín Dvořák",
    "a. dvorak": "Antonín Dvořák",
    "a. dvořák": "Antonín Dvořák",
    "antonin dvorak": "Antonín Dvořák",
    "antonín dvořák": "Antonín Dvořák",
    # Modern
    "debussy": "Claude Debussy",
    "c. debussy": "Claude Debussy",
    "claude debussy": "Claude Debussy",
    "debussy, claude": "Claude Debussy",
    "ravel": "Maurice Ravel",
    "m. ravel": "Maurice Ravel",
    "maurice ravel": "Maurice Ravel",
    "ravel, maurice": "Maurice Ravel",
    "bartók": "Béla Bartók",
    "bartok": "Béla Bartók",
    "b. bartók": "Béla Bartók",
    "b. bartok": "Béla Bartók",
    "béla bartók": "Béla Bartók",
    "bela bartok": "Béla Bartók",
    "bartók béla": "Béla Bartók",
    "prokofiev": "Sergei Prokofiev",
    "s. prokofiev": "Sergei Prokofiev",
    "sergei prokofiev": "Sergei Prokofiev",
    "prokofiev, sergei": "Sergei Prokofiev",
    "прокофьев": "Sergei Prokofiev",
    "shostakovich": "Dmitri Shostakovich",
    "d. shostakovich": "Dmitri Shostakovich",
    "dmitri shostakovich": "Dmitri Shostakovich",
    "shostakovich, dmitri": "Dmitri Shostakovich",
    "шостакович": "Dmitri Shostakovich",
    "stravinsky": "Igor Stravinsky",
    "i. stravinsky": "Igor Stravinsky",
    "igor stravinsky": "Igor Stravinsky",
    "stravinsky, igor": "Igor Stravinsky",
    "стравинский": "Igor Stravinsky",
    "gershwin": "George Gershwin",
    "g. gershwin": "George Gershwin",
    "george gershwin": "George Gershwin",
    "gershwin, george": "George Gershwin",
    "satie": "Erik Satie",
    "e. satie": "Erik Satie",
    "erik satie": "Erik Satie",
    "satie, erik": "Erik Satie",
    # Guitar
    "sor": "Fernando Sor",
    "f. sor": "Fernando Sor",
    "fernando sor": "Fernando Sor",
    "sor, fernando": "Fernando Sor",
    "villa-lobos": "Heitor Villa-Lobos",
    "h. villa-lobos": "Heitor Villa-Lobos",
    "heitor villa-lobos": "Heitor Villa-Lobos",
    "villa-lobos, heitor": "Heitor Villa-Lobos",
    "tarrega": "Francisco Tárrega",
    "tárrega": "Francisco Tárrega",
    "f. tarrega": "Francisco Tárrega",
    "f. tárrega": "Francisco Tárrega",
    "francisco tarrega": "Francisco Tárrega",
    "francisco tárrega": "Francisco Tárrega",
    "tárrega, francisco": "Francisco Tárrega",
    "giuliani": "Mauro Giuliani",
    "m. giuliani": "Mauro Giuliani",
    "mauro giuliani": "Mauro Giuliani",
    "giuliani, mauro": "Mauro Giuliani",
    "carcassi": "Matteo Carcassi",
    "m. carcassi": "Matteo Carcassi",
    "matteo carcassi": "Matteo Carcassi",
    "carcassi, matteo": "Matteo Carcassi",
    "barrios": "Agustín Barrios",
    "a. barrios": "Agustín Barrios",
    "agustin barrios": "Agustín Barrios",
    "agustín barrios": "Agustín Barrios",
    "barrios mangoré": "Agustín Barrios",
    "agustín barrios mangoré": "Agustín Barrios",
    "brouwer": "Leo Brouwer",
    "l. brouwer": "Leo Brouwer",
    "leo brouwer": "Leo Brouwer",
    "brouwer, leo": "Leo Brouwer",
    "rodrigo": "Joaquín Rodrigo",
    "j. rodrigo": "Joaquín Rodrigo",
    "joaquin rodrigo": "Joaquín Rodrigo",
    "joaquín rodrigo": "Joaquín Rodrigo",
    "rodrigo, joaquín": "Joaquín Rodrigo",
    # Pedagogical
    "czerny": "Carl Czerny",
    "c. czerny": "Carl Czerny",
    "carl czerny": "Carl Czerny",
    "czerny, carl": "Carl Czerny",
    "hanon": "Charles-Louis Hanon",
    "c.l. hanon": "Charles-Louis Hanon",
    "charles-louis hanon": "Charles-Louis Hanon",
    "hanon, charles-louis": "Charles-Louis Hanon",
    "burgmüller": "Friedrich Burgmüller",
    "burgmuller": "Friedrich Burgmüller",
    "f. burgmüller": "Friedrich Burgmüller",
    "f. burgmuller": "Friedrich Burgmüller",
    "friedrich burgmüller": "Friedrich Burgmüller",
    "friedrich burgmuller": "Friedrich Burgmüller",
    "kabalevsky": "Dmitri Kabalevsky",
    "d. kabalevsky": "Dmitri Kabalevsky",
    "dmitri kabalevsky": "Dmitri Kabalevsky",
    "kabalevsky, dmitri": "Dmitri Kabalevsky",
    "suzuki": "Shinichi Suzuki",
    "s. suzuki": "Shinichi Suzuki",
    "shinichi suzuki": "Shinichi Suzuki",
    # Traditional and placeholders
    "traditional": "Traditional",
    "trad": "Traditional",
    "trad.": "Traditional",
    "folk": "Traditional",
    "folk song": "Traditional",
    "folksong": "Traditional",
    "anonymous": "Anonymous",
    "anon": "Anonymous",
    "anon.": "Anonymous",
    "unknown": "Unknown",
    "composer unknown": "Unknown",
    "various": "Various Artists",
    "various artists": "Various Artists",
    "v.a.": "Various Artists",
    "compilation": "Various Artists",
    # Jazz and popular
    "joplin": "Scott Joplin",
    "s. joplin": "Scott Joplin",
    "scott joplin": "Scott Joplin",
    "ellington": "Duke Ellington",
    "d. ellington": "Duke Ellington",
    "duke ellington": "Duke Ellington",
    "porter": "Cole Porter",
    "c. porter": "Cole Porter",
    "cole porter": "Cole Porter",
    "kern": "Jerome Kern",
    "j. kern": "Jerome Kern",
    "jerome kern": "Jerome Kern",
    "berlin": "Irving Berlin",
    "i. berlin": "Irving Berlin",
    "irving berlin": "Irving Berlin",
    # Film and contemporary
    "williams": "John Williams",
    "j. williams": "John Williams",
    "john williams": "John Williams",
    "zimmer": "Hans Zimmer",
    "h. zimmer": "Hans Zimmer",
    "hans zimmer": "Hans Zimmer",
    "horner": "James Horner",
    "j. horner": "James Horner",
    "james horner": "James Horner",
    "glass": "Philip Glass",
    "p. glass": "Philip Glass",
    "philip glass": "Philip Glass",
    "reich": "Steve Reich",
    "s. reich": "Steve Reich",
    "steve reich": "Steve Reich",
    "pärt": "Arvo Pärt",
    "part": "Arvo Pärt",
    "a. pärt": "Arvo Pärt",
    "a. part": "Arvo Pärt",
    "arvo pärt": "Arvo Pärt",
    "arvo part": "Arvo Pärt",
}

COMPOSER_CANONICAL_NAMES = MappingProxyType(_COMPOSER_VARIANTS)

# Catalog identifiers that sometimes leak into the composer field.
CATALOG_NUMBER_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, flags=re.IGNORECASE)
    for pattern in (
        r"\bBWV\s*\d+",  # Bach
        r"\bOpus\s*\d+",
        r"\bOp\.\s*\d+",
        r"\bKV\s*\d+",  # Köchel (Mozart)
        r"\bK\.\s*\d+",
        r"\bHob\.\s*[IVX]+",  # Hoboken (Haydn)
        r"\bD\.\s*\d+",  # Deutsch (Schubert)
        r"\bS\.\s*\d+",  # Searle (Liszt)
        r"\bWoO\s*\d+",
        r"\bRV\s*\d+",  # Ryom (Vivaldi)
        r"\bHWV\s*\d+",  # Handel
        r"\bL\.\s*\d+",  # Longo (Scarlatti)
        r"\bNo\.\s*\d+",
        r"\bSz\.\s*\d+",  # Szőllősy (Bartók)
        r"\bBB\s*\d+",
        r"\bZ\.\s*\d+",  # Zimmerman (Purcell)
        r"\bP\.\s*\d+",
        r"\bWD\s*\d+",
        r"\bAnh\.\s*\d+",
    )
)

# Name particles rendered lowercase except at the start of a name.
# Multi-word particles are listed so the formatter can match longest first.
NAME_PARTICLES: frozenset[str] = frozenset(
    {
        "van der",
        "van den",
        "van de",
        "von der",
        "de la",
        "de los",
        "van",
        "von",
        "de",
        "della",
        "di",
        "da",
        "del",
        "dos",
        "das",
        "den",
        "der",
        "la",
        "le",
        "op",
    }
)

MAX_PARTICLE_WORDS = max(len(particle.split()) for particle in NAME_PARTICLES)
