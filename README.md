# ungoliant

Building blocks for generating and checking web-crawled text corpora. The
package has no third-party dependencies.

## Modules

- `ungoliant.document`: `Identification` (a language label and its
  probability), `Metadata` (document identification, optional annotation list,
  per-line identifications) and `Document` (content, WARC headers as bytes,
  metadata). `Metadata.add_annotation` appends a tag; `Document.warc_id` reads
  the `warc-record-id` header; `to_dict`/`from_dict` and
  `Document.to_json`/`Document.from_json` give round trips.
- `ungoliant.location`: `Location`, `LocationBuilder` and `LocationKind`.
  `LocationBuilder.build()` raises `IncompleteLocation` naming the first
  missing field.
- `ungoliant.rebuild`: `RebuildInformation` (a location plus metadata) and
  `ShardResult` (all rebuild information of one shard), built with
  `from_location`/`from_locations`, split with `into_parts`, and converted with
  `to_dict`/`from_dict`.
- `ungoliant.annotators`: the `Annotate` and `Transform` base classes,
  `Annotator` (runs several annotators in order; `add` returns the annotator so
  calls can be chained), and the annotators `Header` (tags `header`/`footer`),
  `Noisy` (tags `noisy`) and `TinyDocument` (tags `tiny`).
- `ungoliant.sentence_filter`: `ShortSentences` (tags `short_sentences`),
  `RemoveShortSentences` (drops short lines at the start and end;
  `transform_text` works on a string, `transform` on a `Document`, both
  returning inclusive line ranges) and `Conv` (the same trimming on line
  lengths averaged over a sliding window, via `transform_idx`).
- `ungoliant.chunks`: `group_by` maps each value to the inclusive ranges of
  its contiguous runs.
- `ungoliant.oscarmeta`: sentence-level `Document` (one language label per
  sentence), `MergedPiece`, `PartChunk` and `Metadata` (headers, line offset,
  sentence count, with JSON round trips). `Document.into_merged_pieces` gives
  one piece per run, `into_merged_pieces_lang` one piece per language.
- `ungoliant.zipf`: `unicode_words`, `Zipf` (lowercased word counts,
  `rank_freq_constant`, `constants`, `mean_constants`, `sig_constants`) and
  `ZipfEntry`.
- `ungoliant.compress`: `compress_file` gzips one file into a destination
  folder as `<name>.gz`; `compress_corpus` does so for every entry of a folder
  concurrently, keeping the originals and returning the failures.
- `ungoliant.packaging`: `package_lang` moves or copies `<lang>.txt.gz` and
  `<lang>_meta.jsonl.gz` (or the `_part_N` files) into `<dst>/<lang>/` and
  writes `<lang>_sha256.txt` through `gen_checksum_file`; `package` does this
  for a list of languages and raises `PackagingError` if any failed.

## Installation

```
pip install .
```

## Example

```python
from ungoliant.document import Document, Metadata
from ungoliant.annotators import Annotator, Header, Noisy, TinyDocument

doc = Document(content="a short\ndocument", warc_headers={}, metadata=Metadata())

annotator = Annotator()
annotator.add(TinyDocument()).add(Header()).add(Noisy())
annotator.annotate(doc)

print(doc.metadata.annotation)  # ['tiny']
```

Counting words:

```python
from ungoliant.zipf import Zipf

zipf = Zipf()
zipf.add_count("foo bar bar baz baz baz")
for entry in zipf.rank_freq_constant():
    print(entry.rank, entry.count, entry.prob, entry.constant)
```

Packaging a compressed corpus:

```python
from ungoliant.packaging import package

package("corpus/", "packaged/", move_files=False, langs=["en", "fr"])
```

## What it does not do

The package works on documents and files that are already at hand. It does
not read WARC/WET shards, identify languages, run a full corpus generation,
deduplication, splitting or rebuild pass, write rebuild files to disk, or
provide a command-line tool; the language list given to `package` has to be
supplied by the caller.

## Running the tests

```
pip install .[test]
pytest
```