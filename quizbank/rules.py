"""
Correction tables for text pulled out of damaged PDF text layers.

Everything here is data. The normalizer walks these lists in order, once
per pass, so adding a fix never means touching control flow. Word rules are
case-insensitive and anchored at a word start; their replacement casing is
adapted to the matched text by the normalizer.
"""
import re
from typing import List, Pattern, Tuple

Rule = Tuple[Pattern, str]

# =============================================================================
# 1. SINGLE GLYPH SUBSTITUTIONS
# =============================================================================
GLYPH_MAP = {
    # Greek theta and friends show up where the 'ti' ligature was
    "\u0398": "ti",  # Θ
    "\u03B8": "ti",  # θ
    "\u019F": "ti",  # Ɵ
    "\u0275": "ti",  # ɵ
    # sigma stands in for the 'tt' ligature
    "\u03A3": "tt",  # Σ
    "\u03C3": "tt",  # σ
    "\u03C2": "tt",  # ς
    # O with tilde stands in for the 'ft' ligature
    "\u00D5": "ft",  # Õ
    "\u00F5": "ft",  # õ
    "\u0192": "f",   # ƒ
    "\u00B5": "u",   # µ
    # real typographic ligatures
    "\uFB00": "ff",
    "\uFB01": "fi",
    "\uFB02": "fl",
    "\uFB03": "ffi",
    "\uFB04": "ffl",
    "\uFB05": "st",
    "\uFB06": "st",
    # quotes
    "\u2018": "'",
    "\u2019": "'",
    "\u201C": '"',
    "\u201D": '"',
    # dashes and ellipsis
    "\u2013": "-",
    "\u2014": "-",
    "\u2026": "...",
    # exotic spaces
    "\u00A0": " ",
    "\u2002": " ",
    "\u2003": " ",
    "\u2009": " ",
    # invisible marks
    "\u200B": "",
    "\u00AD": "",
    "\uFEFF": "",
}

GLYPH_TABLE = str.maketrans(GLYPH_MAP)


def _compile(rules: List[Tuple[str, str]]) -> List[Rule]:
    return [(re.compile(pattern, re.IGNORECASE), replacement) for pattern, replacement in rules]


# =============================================================================
# 2a. RAW GLYPH WORD FIXES (run before GLYPH_TABLE)
# =============================================================================
RAW_GLYPH_WORD_FIXES = _compile([
    (r'\bso\s*[Õõ]\s*ware', 'software'),
    (r'\ba\s*[Õõ]\s*er', 'after'),
    (r'\ble\s*[Õõ]', 'left'),
    (r'\bshi\s*[Õõ]', 'shift'),
    (r'\bdra\s*[Õõ]', 'draft'),
    (r'\bcra\s*[Õõ]', 'craft'),
    (r'\bswi\s*[Õõ]', 'swift'),
    (r'\bli\s*[Õõ]', 'lift'),
    (r'\bgi\s*[Õõ]', 'gift'),
])

# =============================================================================
# 2b. SPLIT WORD FIXES ('ft' and 'tt' after GLYPH_TABLE)
# =============================================================================
SPLIT_WORD_FIXES = _compile([
    # === 'ft' ===
    (r'\bso\s*ft\s*ware', 'software'),
    (r'\bhard\s+ware\b', 'hardware'),
    (r'\ba\s*ft\s*er', 'after'),
    (r'\ble\s*ft\b', 'left'),
    (r'\bshi\s*ft', 'shift'),
    (r'\bdra\s*ft', 'draft'),
    (r'\bcra\s*ft', 'craft'),
    (r'\bswi\s*ft', 'swift'),
    (r'\bli\s*ft\b', 'lift'),
    (r'\bgi\s*ft\b', 'gift'),

    # === 'tt' ===
    (r'\ba\s*tt\s*ributes', 'attributes'),
    (r'\ba\s*tt\s*ribute', 'attribute'),
    (r'\ba\s*tt\s*ribut', 'attribut'),
    (r'\ba\s*tt\s*acker', 'attacker'),
    (r'\ba\s*tt\s*ack', 'attack'),
    (r'\ba\s*tt\s*achment', 'attachment'),
    (r'\ba\s*tt\s*ached', 'attached'),
    (r'\ba\s*tt\s*ach', 'attach'),
    (r'\ba\s*tt\s*empt', 'attempt'),
    (r'\ba\s*tt\s*en', 'atten'),
    # the catch-all would otherwise leave 'nettwork'
    (r'\bne\s*tt\s*work', 'network'),
    (r'\bbe\s*tt\s*er', 'better'),
    (r'\bbu\s*tt\s*on', 'button'),
    (r'\ble\s*tt\s*er', 'letter'),
    (r'\bpa\s*tt\s*ern', 'pattern'),
    (r'\bma\s*tt\s*er', 'matter'),
    (r'\bse\s*tt\s*ing', 'setting'),
    (r'\bge\s*tt\s*ing', 'getting'),
    (r'\bpu\s*tt\s*ing', 'putting'),
    (r'\bwri\s*tt\s*en', 'written'),
    (r'\bpermi\s*tt\s*ed', 'permitted'),
    (r'\btransmi\s*tt\s*ed', 'transmitted'),
    (r'\bemi\s*tt\s*ed', 'emitted'),
    (r'\bsubmi\s*tt\s*ed', 'submitted'),
    (r'\bcommi\s*tt\s*ed', 'committed'),
    (r'\bforma\s*tt\s*ed', 'formatted'),
    (r'\bforma\s*tt\s*ing', 'formatting'),
    (r'\bbo\s*tt\s*om', 'bottom'),
    (r'\bbo\s*tt\s*le', 'bottle'),
    (r'\bsca\s*tt\s*er', 'scatter'),
    (r'\bbi\s*tt\s*er', 'bitter'),
    (r'\bli\s*tt\s*le', 'little'),
    (r'\bba\s*tt\s*le', 'battle'),
    (r'\bco\s*tt\s*on', 'cotton'),
    (r'\bki\s*tt\s*en', 'kitten'),
    (r'\bbi\s*tt\s*en', 'bitten'),
    (r'\bhi\s*tt\s*ing', 'hitting'),
    (r'\bsi\s*tt\s*ing', 'sitting'),
    (r'\bcu\s*tt\s*ing', 'cutting'),
    (r'\bspi\s*tt\s*ing', 'spitting'),
    (r'\bspli\s*tt\s*ing', 'splitting'),
    (r'\bomi\s*tt\s*ing', 'omitting'),
    (r'\badmi\s*tt\s*ing', 'admitting'),
    (r'\bpermi\s*tt\s*ing', 'permitting'),
])

# =============================================================================
# 3. WORD REASSEMBLY ('ti', 'fi', 'fl' and friends)
# =============================================================================
WORD_REASSEMBLY_FIXES = _compile([
    # === -tion ===
    (r'\binser\s*ti\s*on', 'insertion'),
    (r'\bdele\s*ti\s*on', 'deletion'),
    (r'\balloca\s*ti\s*on', 'allocation'),
    (r'\bselec\s*ti\s*on', 'selection'),
    (r'\bcollec\s*ti\s*on', 'collection'),
    (r'\bconnec\s*ti\s*on', 'connection'),
    (r'\bprotec\s*ti\s*on', 'protection'),
    (r'\bdetec\s*ti\s*on', 'detection'),
    (r'\bdirec\s*ti\s*on', 'direction'),
    (r'\bcorrec\s*ti\s*on', 'correction'),
    (r'\brestric\s*ti\s*on', 'restriction'),
    (r'\babstrac\s*ti\s*on', 'abstraction'),
    (r'\btransac\s*ti\s*on', 'transaction'),
    (r'\binterac\s*ti\s*on', 'interaction'),
    (r'\bsubtrac\s*ti\s*on', 'subtraction'),
    (r'\bextrac\s*ti\s*on', 'extraction'),
    (r'\bproduc\s*ti\s*on', 'production'),
    (r'\breduc\s*ti\s*on', 'reduction'),
    (r'\binduc\s*ti\s*on', 'induction'),
    (r'\bdeduc\s*ti\s*on', 'deduction'),
    (r'\bintroduc\s*ti\s*on', 'introduction'),
    (r'\bvalida\s*ti\s*on', 'validation'),
    (r'\bexecu\s*ti\s*on', 'execution'),
    (r'\bfunc\s*ti\s*on', 'function'),
    (r'\bop\s*ti\s*miza\s*ti\s*on', 'optimization'),
    (r'\bop\s*ti\s*mis\s*ti\s*c', 'optimistic'),
    (r'\bop\s*ti\s*on', 'option'),
    (r'\bsec\s*ti\s*on', 'section'),
    (r'\bac\s*ti\s*on', 'action'),
    (r'\bcondi\s*ti\s*on', 'condition'),
    (r'\bitera\s*ti\s*on', 'iteration'),
    (r'\bopera\s*ti\s*on', 'operation'),
    (r'\bapplica\s*ti\s*on', 'application'),
    (r'\bdeclara\s*ti\s*on', 'declaration'),
    (r'\bde\s*fi\s*ni\s*ti\s*on', 'definition'),
    (r'\bdefini\s*ti\s*on', 'definition'),
    (r'\binstruc\s*ti\s*on', 'instruction'),
    (r'\bno\s*ti\s*fica\s*ti\s*on', 'notification'),
    (r'\bauthen\s*ti\s*ca\s*ti\s*on', 'authentication'),
    (r'\biden\s*ti\s*fica\s*ti\s*on', 'identification'),
    (r'\bini\s*ti\s*aliza\s*ti\s*on', 'initialization'),
    (r'\bspeci\s*fi\s*ca\s*ti\s*on', 'specification'),
    (r'\bmodi\s*fi\s*ca\s*ti\s*on', 'modification'),
    (r'\bclassi\s*fi\s*ca\s*ti\s*on', 'classification'),
    (r'\bveri\s*fi\s*ca\s*ti\s*on', 'verification'),
    (r'\bencryp\s*ti\s*on', 'encryption'),
    (r'\bdecryp\s*ti\s*on', 'decryption'),
    (r'\bpar\s*ti\s*ti\s*oning', 'partitioning'),
    (r'\bpar\s*ti\s*ti\s*on', 'partition'),
    (r'\brepe\s*ti\s*ti\s*on', 'repetition'),
    (r'\bcompe\s*ti\s*ti\s*ve', 'competitive'),
    (r'\bcompe\s*ti\s*ti\s*on', 'competition'),
    (r'\baddi\s*ti\s*on', 'addition'),
    (r'\bedi\s*ti\s*on', 'edition'),
    (r'\bposi\s*ti\s*on', 'position'),
    (r'\btransi\s*ti\s*on', 'transition'),
    (r'\bacquisi\s*ti\s*on', 'acquisition'),
    (r'\bpropor\s*ti\s*on', 'proportion'),
    (r'\bsolu\s*ti\s*on', 'solution'),
    (r'\bresolu\s*ti\s*on', 'resolution'),
    (r'\bevolu\s*ti\s*on', 'evolution'),
    (r'\brevolu\s*ti\s*on', 'revolution'),
    (r'\bdistribu\s*ti\s*on', 'distribution'),
    (r'\bcontribu\s*ti\s*on', 'contribution'),
    (r'\bsubstitu\s*ti\s*on', 'substitution'),
    (r'\bconstitu\s*ti\s*on', 'constitution'),
    (r'\binstitu\s*ti\s*on', 'institution'),
    (r'\bprosecu\s*ti\s*on', 'prosecution'),
    (r'\bdescrip\s*ti\s*on', 'description'),
    (r'\bprescrip\s*ti\s*on', 'prescription'),
    (r'\bsubscrip\s*ti\s*on', 'subscription'),
    (r'\brealiza\s*ti\s*on', 'realization'),
    (r'\borganiza\s*ti\s*on', 'organization'),
    (r'\bauthoriza\s*ti\s*on', 'authorization'),
    (r'\bvisualiza\s*ti\s*on', 'visualization'),
    (r'\bnormaliza\s*ti\s*on', 'normalization'),
    (r'\bsynchroniza\s*ti\s*on', 'synchronization'),
    (r'\bserializa\s*ti\s*on', 'serialization'),
    (r'\bvirtualiza\s*ti\s*on', 'virtualization'),
    (r'\blocaliza\s*ti\s*on', 'localization'),
    (r'\bglobaliza\s*ti\s*on', 'globalization'),
    (r'\bcustomiza\s*ti\s*on', 'customization'),
    (r'\binformati\s*on', 'information'),

    # === -ty / -ties / -ice ===
    (r'\biden\s*ti\s*fy', 'identify'),
    (r'\biden\s*ti\s*fied', 'identified'),
    (r'\biden\s*ti\s*fier', 'identifier'),
    (r'\biden\s*ti\s*fies', 'identifies'),
    (r'\biden\s*ti\s*ty', 'identity'),
    (r'\bquan\s*ti\s*ty', 'quantity'),
    (r'\ben\s*ti\s*ties', 'entities'),
    (r'\ben\s*ti\s*ty', 'entity'),
    (r'\buni\s*que\s*ly', 'uniquely'),
    (r'\bprac\s*ti\s*cal', 'practical'),
    (r'\bprac\s*ti\s*ce', 'practice'),
    (r'\bprac\s*ti\s*se', 'practise'),
    (r'\bno\s*ti\s*ce', 'notice'),

    # === -tial / -tiple / -tive ===
    (r'\bpar\s*ti\s*al', 'partial'),
    (r'\bini\s*ti\s*al', 'initial'),
    (r'\bessen\s*ti\s*al', 'essential'),
    (r'\bpoten\s*ti\s*al', 'potential'),
    (r'\bsequen\s*ti\s*al', 'sequential'),
    (r'\bmul\s*ti\s*ple', 'multiple'),
    (r'\bmul\s*ti\s*pli', 'multipli'),
    (r'\bposi\s*ti\s*ve', 'positive'),
    (r'\bnega\s*ti\s*ve', 'negative'),
    (r'\brela\s*ti\s*ve', 'relative'),
    (r'\bprimi\s*ti\s*ve', 'primitive'),
    (r'\bexecu\s*ti\s*ve', 'executive'),
    (r'\bitera\s*ti\s*ve', 'iterative'),
    (r'\btransi\s*ti\s*ve', 'transitive'),
    (r'\bsensi\s*ti\s*ve', 'sensitive'),
    (r'\beffec\s*ti\s*ve', 'effective'),
    (r'\bselec\s*ti\s*ve', 'selective'),
    (r'\bobjec\s*ti\s*ve', 'objective'),
    (r'\bsubjec\s*ti\s*ve', 'subjective'),
    (r'\baddic\s*ti\s*ve', 'addictive'),
    (r'\bpredic\s*ti\s*ve', 'predictive'),
    (r'\brestric\s*ti\s*ve', 'restrictive'),
    (r'\bdescrip\s*ti\s*ve', 'descriptive'),
    (r'\bproduc\s*ti\s*ve', 'productive'),
    (r'\bdestruc\s*ti\s*ve', 'destructive'),
    (r'\binstruc\s*ti\s*ve', 'instructive'),
    (r'\bconstruc\s*ti\s*ve', 'constructive'),
    (r'\balterna\s*ti\s*ve', 'alternative'),
    (r'\bquan\s*ti\s*ta\s*ti\s*ve', 'quantitative'),
    (r'\bquali\s*ta\s*ti\s*ve', 'qualitative'),
    (r'\bcoopera\s*ti\s*ve', 'cooperative'),
    (r'\brepre\s*sen\s*ta\s*ti\s*ve', 'representative'),

    # === -ting ===
    (r'\bloca\s*ti\s*ng', 'locating'),
    (r'\bcorrec\s*ti\s*ng', 'correcting'),
    (r'\btes\s*ti\s*ng', 'testing'),
    (r'\bexis\s*ti\s*ng', 'existing'),
    (r'\bsor\s*ti\s*ng', 'sorting'),
    (r'\bprin\s*ti\s*ng', 'printing'),
    (r'\bwri\s*ti\s*ng', 'writing'),
    (r'\bedi\s*ti\s*ng', 'editing'),
    (r'\bcompu\s*ti\s*ng', 'computing'),
    (r'\bcoun\s*ti\s*ng', 'counting'),
    (r'\bpoin\s*ti\s*ng', 'pointing'),
    (r'\bselec\s*ti\s*ng', 'selecting'),
    (r'\bcrea\s*ti\s*ng', 'creating'),
    (r'\bdele\s*ti\s*ng', 'deleting'),
    (r'\bupda\s*ti\s*ng', 'updating'),
    (r'\bconnec\s*ti\s*ng', 'connecting'),
    (r'\bconver\s*ti\s*ng', 'converting'),
    (r'\brepresen\s*ti\s*ng', 'representing'),
    (r'\bitera\s*ti\s*ng', 'iterating'),
    (r'\bopera\s*ti\s*ng', 'operating'),
    (r'\bgenera\s*ti\s*ng', 'generating'),
    (r'\bnaviga\s*ti\s*ng', 'navigating'),
    (r'\bcalcula\s*ti\s*ng', 'calculating'),
    (r'\bsimula\s*ti\s*ng', 'simulating'),
    (r'\bevalua\s*ti\s*ng', 'evaluating'),
    (r'\bvalida\s*ti\s*ng', 'validating'),
    (r'\bcommunica\s*ti\s*ng', 'communicating'),
    (r'\bdemonstra\s*ti\s*ng', 'demonstrating'),
    (r'\btermina\s*ti\s*ng', 'terminating'),
    (r'\borigina\s*ti\s*ng', 'originating'),
    (r'\bredirec\s*ti\s*ng', 'redirecting'),
    (r'\bpredic\s*ti\s*ng', 'predicting'),
    (r'\brestar\s*ti\s*ng', 'restarting'),
    (r'\bstar\s*ti\s*ng', 'starting'),
    (r'\bexpor\s*ti\s*ng', 'exporting'),
    (r'\bimpor\s*ti\s*ng', 'importing'),
    (r'\bsuppor\s*ti\s*ng', 'supporting'),
    (r'\brepor\s*ti\s*ng', 'reporting'),
    (r'\basser\s*ti\s*ng', 'asserting'),
    (r'\binser\s*ti\s*ng', 'inserting'),
    (r'\binver\s*ti\s*ng', 'inverting'),
    (r'\brever\s*ti\s*ng', 'reverting'),
    (r'\bdiver\s*ti\s*ng', 'diverting'),
    (r'\badver\s*ti\s*sing', 'advertising'),
    (r'\balterna\s*ti\s*ng', 'alternating'),
    (r'\bimplemen\s*ti\s*ng', 'implementing'),
    (r'\bdocumen\s*ti\s*ng', 'documenting'),

    # === -time ===
    (r'\brun\s*ti\s*me', 'runtime'),
    (r'\blife\s*ti\s*me', 'lifetime'),
    (r'\bsome\s*ti\s*me', 'sometime'),
    (r'\bmean\s*ti\s*me', 'meantime'),
    (r'\bover\s*ti\s*me', 'overtime'),

    # === -tical / -tic / -ticle ===
    (r'\bar\s*ti\s*cle', 'article'),
    (r'\bpar\s*ti\s*cle', 'particle'),
    (r'\bver\s*ti\s*cal', 'vertical'),
    (r'\bar\s*ti\s*fi\s*cial', 'artificial'),
    (r'\biden\s*ti\s*cal', 'identical'),
    (r'\bcri\s*ti\s*cal', 'critical'),
    (r'\banaly\s*ti\s*cal', 'analytical'),
    (r'\bpoli\s*ti\s*cal', 'political'),
    (r'\btheore\s*ti\s*cal', 'theoretical'),
    (r'\balphabe\s*ti\s*cal', 'alphabetical'),
    (r'\bgramma\s*ti\s*cal', 'grammatical'),
    (r'\bmathema\s*ti\s*cal', 'mathematical'),
    (r'\bstatis\s*ti\s*cal', 'statistical'),
    (r'\bautoma\s*ti\s*c', 'automatic'),
    (r'\bpragma\s*ti\s*c', 'pragmatic'),
    (r'\bsta\s*ti\s*c', 'static'),
    (r'\bsystema\s*ti\s*c', 'systematic'),
    (r'\bproblema\s*ti\s*c', 'problematic'),
    (r'\bschema\s*ti\s*c', 'schematic'),
    (r'\bdiagramma\s*ti\s*c', 'diagrammatic'),
    (r'\bchroma\s*ti\s*c', 'chromatic'),
    (r'\baroma\s*ti\s*c', 'aromatic'),
    (r'\bdiploma\s*ti\s*c', 'diplomatic'),
    (r'\bcharacteris\s*ti\s*c', 'characteristic'),
    (r'\bheuris\s*ti\s*c', 'heuristic'),
    (r'\bdeterminis\s*ti\s*c', 'deterministic'),
    (r'\bprobabilis\s*ti\s*c', 'probabilistic'),
    (r'\blinguis\s*ti\s*c', 'linguistic'),
    (r'\brealis\s*ti\s*c', 'realistic'),
    (r'\bpessimis\s*ti\s*c', 'pessimistic'),
    (r'\bstochas\s*ti\s*c', 'stochastic'),
    (r'\bdomes\s*ti\s*c', 'domestic'),
    (r'\belas\s*ti\s*c', 'elastic'),
    (r'\bfantas\s*ti\s*c', 'fantastic'),
    (r'\bdras\s*ti\s*c', 'drastic'),
    (r'\bplas\s*ti\s*c', 'plastic'),
    (r'\btac\s*ti\s*c', 'tactic'),
    (r'\bsynthe\s*ti\s*c', 'synthetic'),
    (r'\bgene\s*ti\s*c', 'genetic'),
    (r'\bmagne\s*ti\s*c', 'magnetic'),
    (r'\baesthe\s*ti\s*c', 'aesthetic'),
    (r'\bseman\s*ti\s*c', 'semantic'),
    (r'\bauthen\s*ti\s*cat', 'authenticat'),
    (r'\bauthen\s*ti\s*c', 'authentic'),
    (r'\biden\s*ti\s*c', 'identic'),

    # === word stems ===
    (r'\brec\s*ti\s*fi', 'rectifi'),
    (r'\bcer\s*ti\s*fi', 'certifi'),
    (r'\bjus\s*ti\s*fi', 'justifi'),
    (r'\bra\s*ti\s*o', 'ratio'),
    (r'\bpa\s*ti\s*ent', 'patient'),
    (r'\bquo\s*ti\s*ent', 'quotient'),
    (r'\bingredi\s*ent', 'ingredient'),
    (r'\bparti\s*cular', 'particular'),
    (r'\bar\s*ti\s*fact', 'artifact'),
    (r'\bop\s*ti\s*m', 'optim'),
    (r'\breac\s*ti\s*v', 'reactiv'),
    (r'\bproac\s*ti\s*v', 'proactiv'),
    (r'\binterac\s*ti\s*v', 'interactiv'),
    (r'\bac\s*ti\s*v', 'activ'),
    (r'\bcap\s*ti\s*v', 'captiv'),
    (r'\bna\s*ti\s*v', 'nativ'),
    (r'\bmo\s*ti\s*v', 'motiv'),
    (r'\bini\s*ti\s*at', 'initiat'),
    (r'\bne\s*go\s*ti\s*at', 'negotiat'),
    (r'\bdifferen\s*ti\s*at', 'differentiat'),

    # === 'fi' / 'ffi' ===
    (r'\bde\s*fi\s*ned', 'defined'),
    (r'\bde\s*fi\s*ne', 'define'),
    (r'\bfi\s*les\b', 'files'),
    (r'\bfi\s*le\b', 'file'),
    (r'\bfi\s*nd', 'find'),
    (r'\bfi\s*rst\b', 'first'),
    (r'\bspeci\s*fi\s*c', 'specific'),
    (r'\bspe\s*cific', 'specific'),
    (r'\bmodi\s*fi\s*er', 'modifier'),
    (r'\bidenti\s*fi\s*er', 'identifier'),
    (r'\beffici\s*ency', 'efficiency'),
    (r'\beffici\s*ent', 'efficient'),
    (r'\bsuffi\s*cient', 'sufficient'),
    (r'\bdefici\s*ent', 'deficient'),
    (r'\bdiffi\s*cult', 'difficult'),

    # === 'fl' ===
    (r'\bfl\s+ow\b', 'flow'),
    (r'\bfl\s+oat\b', 'float'),
    (r'\bfl\s+ag\b', 'flag'),
])

# =============================================================================
# 4. ORPHANED LIGATURE INFIX (catch-all, runs last)
# =============================================================================
ORPHAN_INFIX = re.compile(r"(?<=[A-Za-z]{2})\s+(ti|tt|ft|ffi|ffl)\s+(?=[A-Za-z]{2})")

# =============================================================================
# 5. DOCUMENT NOISE
# =============================================================================
NOISE_PATTERNS = _compile([
    (r'The\s*Mann\s*Maker\s*\|\s*RANJAN\s*KALINDI(?:\s*\d+(?![\d.)]))?', ' '),
    (r'RANJAN\s*KALINDI(?:\s*\d+(?![\d.)]))?', ' '),
    (r'The\s*Mann\s*Maker', ' '),
    (r'\bPage\s*\d+\s*of\s*\d+', ' '),
    (r'\bhttps?://\S+', ' '),
    (r'\bwww\.[a-z0-9.-]+\.(?:com|org|net|in|edu|io)\b\S*', ' '),
])

WHITESPACE = re.compile(r"\s+")


def phrase_pattern(phrase: str) -> Pattern:
    """Compile a literal watermark phrase, tolerating any spacing between its words."""
    return re.compile(r"\s*".join(re.escape(word) for word in phrase.split()), re.IGNORECASE)
