# %% [markdown]
# # fuzzysim: A Quick Tour
#
# Messy text needs forgiving comparisons:
#
# ```
# "recieve"         vs  "receive"
# "Smith John"      vs  "John Smith"
# "MARTHA"          vs  "MARHTA"
# ```
#
# | Part | Topic |
# |------|-------|
# | 1 | Edit distances |
# | 2 | Jaro-Winkler and tokens |
# | 3 | Hamming and MostFreqK |
# | 4 | Batch helpers |
# | 5 | Polars |

# %%
import polars as pl

import fuzzysim as fs

# %% [markdown]
# ## Part 1: Edit distances
#
# Levenshtein counts insertions, deletions and substitutions. The
# Damerau-Levenshtein (OSA) variant also treats an adjacent swap as one edit.

# %%
print(fs.levenshtein("kitten", "sitting"))  # 3
print(fs.levenshtein("recieve", "receive"))  # 2
print(fs.damerau_levenshtein("recieve", "receive"))  # 1
print(f"{fs.levenshtein_similarity('kitten', 'sitting'):.3f}")

# %% [markdown]
# ## Part 2: Jaro-Winkler and tokens
#
# Jaro-Winkler rewards a shared prefix, which suits short names.
# Token similarity ignores word order and case.

# %%
print(f"{fs.jaro_similarity('MARTHA', 'MARHTA'):.4f}")  # 0.9444
print(f"{fs.jaro_winkler_similarity('MARTHA', 'MARHTA'):.4f}")  # 0.9611
print(fs.token_similarity("Smith John", "john smith"))  # 1.0
print(fs.similarity("Smith John", "John Smith"))  # combined: 1.0

# %% [markdown]
# ## Part 3: Hamming and MostFreqK
#
# Hamming only compares equal-length strings and returns None otherwise.

# %%
print(fs.hamming("karolin", "kathrin"))  # 3
print(fs.hamming("abc", "abcd"))  # None
print(fs.most_frequent_k("research", 2))
print(fs.most_freq_k_distance("research", "seeking"))
print(f"{fs.normalized_most_freq_k_similarity('research', 'seeking'):.3f}")

# %% [markdown]
# ## Part 4: Batch helpers

# %%
fruits = ["apple", "apply", "banana", "grape"]
for match in fs.batch.best_matches(fruits, "appel", limit=2):
    print(f"{match.text}: {match.score:.3f}")

result = fs.batch.deduplicate(
    ["John Smith", "Jon Smith", "Jane Doe", "John Smyth"], min_similarity=0.85
)
print(result.groups, result.unique)

# %% [markdown]
# ## Part 5: Polars
#
# Importing fuzzysim registers the `.strsim` expression namespace.

# %%
df = pl.DataFrame({"left": ["recieve", "seperate", "untill"], "right": ["receive", "separate", "until"]})
print(
    df.with_columns(
        score=pl.col("left").strsim.similarity(pl.col("right"), algorithm="damerau_levenshtein"),
        edits=pl.col("left").strsim.distance(pl.col("right"), algorithm="damerau_levenshtein"),
    )
)

print(fs.match_series(pl.Series(["appel", "banan"]), pl.Series(fruits), min_similarity=0.8))
