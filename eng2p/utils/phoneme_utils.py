# eng2p/utils/phoneme_utils.py

"""
Phoneme alphabet and stress helpers:
- Symbol sets for US / GB English (validation of lexicon entries)
- Stress weight (heaviness of a phoneme string)
- Stress marker rewriting (apply_stress)
"""

from typing import Optional

PRIMARY_STRESS = "ˈ"
SECONDARY_STRESS = "ˌ"
STRESSES = SECONDARY_STRESS + PRIMARY_STRESS

VOWELS = frozenset("AIOQWYaiuæɑɒɔəɛɜɪʊʌᵻ")
CONSONANTS = frozenset("bdfhjklmnpstvwzðŋɡɹɾʃʒʤʧθ")
DIPHTHONGS = frozenset("AIOQWYʤʧ")

# Vowels before which a US /t/ is flapped
US_TAUS = frozenset("AIOWYiuæɑəɛɪɹʊʌ")

US_VOCAB = frozenset("AIOWYbdfhijklmnpstuvwzæðŋɑɔəɛɜɡɪɹɾʃʊʌʒʤʧˈˌθᵊᵻʔ")
GB_VOCAB = frozenset("AIQWYabdfhijklmnpstuvwzðŋɑɒɔəɛɜɡɪɹʃʊʌʒʤʧˈˌːθᵊ")


def get_vocab(british=False):
    return GB_VOCAB if british else US_VOCAB


def is_valid_phoneme_seq(seq, phoneme_set=None):
    """
    Check that a sequence only holds symbols of the phoneme set.
    Defaults to the US alphabet.
    """
    if phoneme_set is None:
        phoneme_set = US_VOCAB
    for c in seq:
        if c not in phoneme_set:
            return False
    return True


def stress_weight(ps: Optional[str]) -> int:
    """
    Heaviness of a phoneme string: 2 per diphthong, 1 per other symbol.
    """
    if not ps:
        return 0
    return sum(2 if c in DIPHTHONGS else 1 for c in ps)


def _restress(ps: str) -> str:
    ips = list(enumerate(ps))
    stresses = {
        i: next((j for j, v in ips[i:] if v in VOWELS), i)
        for i, p in ips if p in STRESSES
    }
    for i, j in stresses.items():
        ips[i] = (j - 0.5, ips[i][1])
    return "".join(p for _, p in sorted(ips, key=lambda x: x[0]))


def apply_stress(ps: Optional[str], stress: Optional[float]) -> Optional[str]:
    """
    Rewrite the stress markers of a phoneme string.

    stress:
        None      : unchanged
        < -1      : strip every marker
        -1        : primary -> secondary (also 0 / -0.5 when a primary is present)
        0, 0.5, 1 : add a secondary before the first vowel if unmarked
        >= 1      : secondary -> primary if there is no primary
        > 1       : add a primary before the first vowel if unmarked
    """
    if ps is None or stress is None:
        return ps
    unstressed = all(s not in ps for s in STRESSES)
    if stress < -1:
        return ps.replace(PRIMARY_STRESS, "").replace(SECONDARY_STRESS, "")
    elif stress == -1 or (stress in (0, -0.5) and PRIMARY_STRESS in ps):
        return ps.replace(SECONDARY_STRESS, "").replace(PRIMARY_STRESS, SECONDARY_STRESS)
    elif stress in (0, 0.5, 1) and unstressed:
        if all(v not in ps for v in VOWELS):
            return ps
        return _restress(SECONDARY_STRESS + ps)
    elif stress >= 1 and PRIMARY_STRESS not in ps and SECONDARY_STRESS in ps:
        return ps.replace(SECONDARY_STRESS, PRIMARY_STRESS)
    elif stress > 1 and unstressed:
        if all(v not in ps for v in VOWELS):
            return ps
        return _restress(PRIMARY_STRESS + ps)
    return ps


if __name__ == "__main__":
    # Demo/debug manual
    print(stress_weight("AIO"), stress_weight("bcd"))
    print(apply_stress("kˈOkəɹO", -1))
    print(apply_stress("ɪt", 0.5))
