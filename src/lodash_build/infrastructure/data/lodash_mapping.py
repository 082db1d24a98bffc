"""Hand-authored dependency tables for the lodash source.

Every key of FUNC_DEPS is a canonical identifier defined in the lodash
source (public functions, internal helpers and top-level snippets).
VAR_DEPS and OBJ_DEPS only list functions with at least one edge.

These tables are raw data. Read them through
lodash_build.infrastructure.loader.load_lodash_graph(), which validates
them once and freezes them into a DependencyGraph.
"""

from __future__ import annotations

# =============================================================================
# FUNCTION DEPENDENCIES
# =============================================================================

FUNC_DEPS: dict[str, tuple[str, ...]] = {
    # Top level
    "main": ("lodash", "mixin"),
    # Array
    "chunk": ("baseSlice", "isIterateeCall"),
    "compact": (),
    "difference": ("baseDifference", "baseFlatten", "isArguments", "isArray"),
    "drop": ("baseSlice", "isIterateeCall"),
    "dropRight": ("baseSlice", "isIterateeCall"),
    "dropRightWhile": ("baseCallback", "baseSlice"),
    "dropWhile": ("baseCallback", "baseSlice"),
    "findIndex": ("baseCallback",),
    "findLastIndex": ("baseCallback",),
    "first": (),
    "flatten": ("baseFlatten", "isIterateeCall"),
    "flattenDeep": ("baseFlatten",),
    "indexOf": ("baseIndexOf", "binaryIndex"),
    "initial": ("dropRight",),
    "intersection": ("baseIndexOf", "cacheIndexOf", "createCache", "isArguments", "isArray"),
    "last": (),
    "lastIndexOf": ("binaryIndex", "indexOfNaN"),
    "pull": ("baseIndexOf",),
    "pullAt": ("baseAt", "baseCompareAscending", "baseFlatten", "basePullAt"),
    "remove": ("baseCallback", "basePullAt"),
    "rest": ("drop",),
    "slice": ("baseSlice", "isIterateeCall"),
    "sortedIndex": ("baseCallback", "binaryIndex", "binaryIndexBy"),
    "sortedLastIndex": ("baseCallback", "binaryIndex", "binaryIndexBy"),
    "take": ("baseSlice", "isIterateeCall"),
    "takeRight": ("baseSlice", "isIterateeCall"),
    "takeRightWhile": ("baseCallback", "baseSlice"),
    "takeWhile": ("baseCallback", "baseSlice"),
    "union": ("baseFlatten", "baseUniq"),
    "uniq": ("baseCallback", "baseUniq", "isIterateeCall", "sortedUniq"),
    "unzip": ("arrayMap", "arrayMax", "baseProperty"),
    "without": ("baseDifference", "isArguments", "isArray"),
    "xor": ("baseDifference", "baseUniq", "isArguments", "isArray"),
    "zip": ("unzip",),
    "zipObject": ("isArray",),
    # Chain
    "chain": ("lodash",),
    "lodash": ("LodashWrapper", "isArray", "isObjectLike"),
    "tap": (),
    "thru": (),
    "wrapperChain": ("chain",),
    "wrapperToString": (),
    "wrapperValueOf": ("baseWrapperValue",),
    # Collection
    "at": ("baseAt", "baseFlatten", "isLength", "toIterable"),
    "contains": ("baseIndexOf", "isLength", "isString", "values"),
    "countBy": ("createAggregator",),
    "every": ("arrayEvery", "baseCallback", "baseEvery", "isArray"),
    "filter": ("arrayFilter", "baseCallback", "baseFilter", "isArray"),
    "find": ("baseCallback", "baseEach", "baseFind", "findIndex", "isArray"),
    "findLast": ("baseCallback", "baseEachRight", "baseFind"),
    "findWhere": ("baseMatches", "find"),
    "forEach": ("arrayEach", "baseEach", "bindCallback", "isArray"),
    "forEachRight": ("arrayEachRight", "baseEachRight", "bindCallback", "isArray"),
    "groupBy": ("createAggregator",),
    "indexBy": ("createAggregator",),
    "invoke": ("baseInvoke",),
    "map": ("arrayMap", "baseCallback", "baseMap", "isArray"),
    "max": ("arrayMax", "createExtremum"),
    "min": ("arrayMin", "createExtremum"),
    "partition": ("createAggregator",),
    "pluck": ("baseProperty", "map"),
    "reduce": ("arrayReduce", "baseCallback", "baseEach", "baseReduce", "isArray"),
    "reduceRight": ("arrayReduceRight", "baseCallback", "baseEachRight", "baseReduce", "isArray"),
    "reject": ("arrayFilter", "baseCallback", "baseFilter", "isArray"),
    "sample": ("baseRandom", "isIterateeCall", "shuffle", "toIterable"),
    "shuffle": ("baseRandom", "toIterable"),
    "size": ("isLength", "keys"),
    "some": ("arraySome", "baseCallback", "baseSome", "isArray", "isIterateeCall"),
    "sortBy": (
        "baseCallback",
        "baseEach",
        "baseSortBy",
        "compareAscending",
        "isIterateeCall",
        "isLength",
    ),
    "toArray": ("arrayCopy", "isLength", "values"),
    "where": ("baseMatches", "filter"),
    # Function
    "after": ("isFunction",),
    "before": ("isFunction",),
    "bind": ("createWrapper", "replaceHolders"),
    "bindAll": ("baseFlatten", "createWrapper", "functions"),
    "bindKey": ("createWrapper", "replaceHolders"),
    "compose": ("arrayEvery", "isFunction"),
    "curry": ("createWrapper", "isIterateeCall"),
    "curryRight": ("createWrapper", "isIterateeCall"),
    "debounce": ("isObject", "now"),
    "defer": ("baseDelay",),
    "delay": ("baseDelay",),
    "memoize": ("MapCache", "isFunction"),
    "negate": ("isFunction",),
    "once": ("before",),
    "partial": ("createWrapper", "replaceHolders"),
    "partialRight": ("createWrapper", "replaceHolders"),
    "throttle": ("debounce", "isObject"),
    "wrap": ("createWrapper", "identity"),
    # Object
    "assign": ("baseAssign", "createAssigner"),
    "clone": ("baseClone", "bindCallback", "isIterateeCall"),
    "cloneDeep": ("baseClone", "bindCallback"),
    "create": ("baseAssign", "baseCreate", "isIterateeCall"),
    "defaults": ("arrayCopy", "assign", "assignDefaults"),
    "findKey": ("baseCallback", "baseFind", "baseForOwn"),
    "findLastKey": ("baseCallback", "baseFind", "baseForOwnRight"),
    "forIn": ("baseFor", "bindCallback", "keysIn"),
    "forInRight": ("baseForRight", "bindCallback", "keysIn"),
    "forOwn": ("baseForOwn", "bindCallback"),
    "forOwnRight": ("baseForOwnRight", "bindCallback"),
    "functions": ("baseFunctions", "keysIn"),
    "has": (),
    "invert": ("isIterateeCall", "keys"),
    "isArguments": ("isLength", "isObjectLike"),
    "isArray": ("isLength", "isNative", "isObjectLike"),
    "isBoolean": ("isObjectLike",),
    "isDate": ("isObjectLike",),
    "isElement": ("isObjectLike", "isPlainObject"),
    "isEmpty": (
        "isArguments",
        "isArray",
        "isFunction",
        "isLength",
        "isObjectLike",
        "isString",
        "keys",
    ),
    "isEqual": ("baseIsEqual", "bindCallback", "isStrictComparable"),
    "isError": ("isObjectLike",),
    "isFinite": ("isNative",),
    "isFunction": ("isNative",),
    "isNaN": ("isNumber",),
    "isNull": (),
    "isNumber": ("isObjectLike",),
    "isObject": (),
    "isPlainObject": ("isNative", "shimIsPlainObject"),
    "isRegExp": ("isObjectLike",),
    "isString": ("isObjectLike",),
    "isUndefined": (),
    "keys": ("isLength", "isNative", "isObject", "shimKeys"),
    "keysIn": ("isArguments", "isArray", "isIndex", "isLength", "isObject"),
    "mapValues": ("baseCallback", "baseForOwn"),
    "merge": ("baseMerge", "createAssigner"),
    "omit": (
        "arrayMap",
        "baseDifference",
        "baseFlatten",
        "bindCallback",
        "keysIn",
        "pickByArray",
        "pickByCallback",
    ),
    "pairs": ("keys",),
    "pick": ("baseFlatten", "bindCallback", "pickByArray", "pickByCallback"),
    "transform": (
        "arrayEach",
        "baseCallback",
        "baseCreate",
        "baseForOwn",
        "isArray",
        "isFunction",
        "isObject",
    ),
    "values": ("baseValues", "keys"),
    "valuesIn": ("baseValues", "keysIn"),
    # String
    "camelCase": ("createCompounder",),
    "capitalize": ("baseToString",),
    "endsWith": ("baseToString",),
    "escape": ("baseToString", "escapeHtmlChar"),
    "escapeRegExp": ("baseToString",),
    "kebabCase": ("createCompounder",),
    "pad": ("baseToString", "createPadding"),
    "padLeft": ("baseToString", "createPadding"),
    "padRight": ("baseToString", "createPadding"),
    "repeat": ("baseToString",),
    "snakeCase": ("createCompounder",),
    "startsWith": ("baseToString",),
    "template": (
        "assignOwnDefaults",
        "attempt",
        "baseToString",
        "baseValues",
        "escapeStringChar",
        "isError",
        "isIterateeCall",
        "keys",
        "templateSettings",
    ),
    "templateSettings": ("escape",),
    "trim": (
        "baseToString",
        "charsLeftIndex",
        "charsRightIndex",
        "isIterateeCall",
        "trimmedLeftIndex",
        "trimmedRightIndex",
    ),
    "trimLeft": ("baseToString", "charsLeftIndex", "isIterateeCall", "trimmedLeftIndex"),
    "trimRight": ("baseToString", "charsRightIndex", "isIterateeCall", "trimmedRightIndex"),
    "trunc": ("baseToString", "isIterateeCall", "isObject", "isRegExp"),
    "unescape": ("baseToString", "unescapeHtmlChar"),
    # Utility
    "attempt": ("isError",),
    "callback": ("baseCallback", "isIterateeCall", "isObjectLike", "matches"),
    "constant": (),
    "identity": (),
    "matches": ("baseClone", "baseMatches"),
    "mixin": ("arrayCopy", "arrayEach", "baseFunctions", "isFunction", "isObject", "keys"),
    "noConflict": (),
    "noop": (),
    "now": ("isNative",),
    "parseInt": ("isIterateeCall", "trim"),
    "property": ("baseProperty",),
    "random": ("baseRandom", "isIterateeCall"),
    "range": ("isIterateeCall",),
    "result": ("isFunction",),
    "runInContext": (),
    "times": ("bindCallback",),
    "uniqueId": ("baseToString",),
    # Internal helpers
    "LodashWrapper": (),
    "MapCache": ("mapDelete", "mapGet", "mapHas", "mapSet"),
    "SetCache": ("cachePush",),
    "arrayCopy": (),
    "arrayEach": (),
    "arrayEachRight": (),
    "arrayEvery": (),
    "arrayFilter": (),
    "arrayMap": (),
    "arrayMax": (),
    "arrayMin": (),
    "arrayReduce": (),
    "arrayReduceRight": (),
    "arraySome": (),
    "assignDefaults": (),
    "assignOwnDefaults": (),
    "baseAssign": ("baseCopy", "keys"),
    "baseAt": ("isIndex", "isLength"),
    "baseCallback": ("baseMatches", "baseProperty", "bindCallback", "identity"),
    "baseClone": (
        "arrayCopy",
        "arrayEach",
        "baseAssign",
        "baseClone",
        "baseForOwn",
        "initCloneArray",
        "initCloneByTag",
        "initCloneObject",
        "isArray",
        "isObject",
    ),
    "baseCompareAscending": (),
    "baseCopy": (),
    "baseCreate": ("isObject",),
    "baseDelay": (),
    "baseDifference": ("baseIndexOf", "cacheIndexOf", "createCache"),
    "baseEach": ("baseForOwn", "isLength", "toObject"),
    "baseEachRight": ("baseForOwnRight", "isLength", "toObject"),
    "baseEvery": ("baseEach",),
    "baseFilter": ("baseEach",),
    "baseFind": (),
    "baseFlatten": ("isArguments", "isArray", "isLength", "isObjectLike"),
    "baseFor": ("toObject",),
    "baseForIn": ("baseFor", "keysIn"),
    "baseForOwn": ("baseFor", "keys"),
    "baseForOwnRight": ("baseForRight", "keys"),
    "baseForRight": ("toObject",),
    "baseFunctions": ("isFunction",),
    "baseIndexOf": ("indexOfNaN",),
    "baseInvoke": ("baseEach", "isLength"),
    "baseIsEqual": ("baseIsEqualDeep", "isObject"),
    "baseIsEqualDeep": ("equalArrays", "equalByTag", "equalObjects", "isArray"),
    "baseIsMatch": ("baseIsEqual",),
    "baseMap": ("baseEach",),
    "baseMatches": ("baseIsMatch", "isStrictComparable", "keys", "toObject"),
    "baseMerge": (
        "arrayEach",
        "baseForOwn",
        "baseMergeDeep",
        "isArray",
        "isLength",
        "isObjectLike",
    ),
    "baseMergeDeep": (
        "arrayCopy",
        "baseMerge",
        "isArguments",
        "isArray",
        "isLength",
        "isPlainObject",
    ),
    "baseProperty": (),
    "basePullAt": ("isIndex",),
    "baseRandom": (),
    "baseReduce": (),
    "baseSetData": ("identity",),
    "baseSlice": (),
    "baseSome": ("baseEach",),
    "baseSortBy": (),
    "baseToString": (),
    "baseUniq": ("baseIndexOf", "cacheIndexOf", "createCache"),
    "baseValues": (),
    "baseWrapperValue": (),
    "binaryIndex": ("binaryIndexBy", "identity"),
    "binaryIndexBy": (),
    "bindCallback": ("identity",),
    "bufferClone": ("constant",),
    "cacheIndexOf": ("isObject",),
    "cachePush": ("isObject",),
    "charsLeftIndex": (),
    "charsRightIndex": (),
    "compareAscending": ("baseCompareAscending",),
    "composeArgs": (),
    "composeArgsRight": (),
    "createAggregator": ("baseCallback", "baseEach", "isArray"),
    "createAssigner": ("bindCallback", "isIterateeCall"),
    "createBindWrapper": ("createCtorWrapper",),
    "createCache": ("SetCache",),
    "createCompounder": ("arrayReduce", "deburr", "words"),
    "createCtorWrapper": ("baseCreate", "isObject"),
    "createExtremum": ("baseCallback", "baseEach", "isArray", "isIterateeCall"),
    "createHybridWrapper": (
        "arrayCopy",
        "composeArgs",
        "composeArgsRight",
        "createCtorWrapper",
        "reorder",
        "replaceHolders",
        "setData",
    ),
    "createPadding": ("repeat",),
    "createPartialWrapper": ("createCtorWrapper",),
    "createWrapper": (
        "baseSetData",
        "createBindWrapper",
        "createHybridWrapper",
        "createPartialWrapper",
        "getData",
        "mergeData",
        "setData",
    ),
    "deburr": ("baseToString",),
    "equalArrays": (),
    "equalByTag": (),
    "equalObjects": ("keys",),
    "escapeHtmlChar": (),
    "escapeStringChar": (),
    "getData": (),
    "indexOfNaN": (),
    "initCloneArray": (),
    "initCloneByTag": ("bufferClone",),
    "initCloneObject": (),
    "isIndex": (),
    "isIterateeCall": ("isIndex", "isLength", "isObject"),
    "isLength": (),
    "isNative": (),
    "isObjectLike": (),
    "isSpace": (),
    "isStrictComparable": ("isObject",),
    "mapDelete": (),
    "mapGet": (),
    "mapHas": (),
    "mapSet": (),
    "mergeData": ("arrayCopy", "composeArgs", "composeArgsRight", "replaceHolders"),
    "pickByArray": ("toObject",),
    "pickByCallback": ("baseForIn",),
    "reorder": ("arrayCopy", "isIndex"),
    "replaceHolders": (),
    "setData": ("baseSetData", "now"),
    "shimIsPlainObject": ("baseForIn", "isArguments", "isObjectLike"),
    "shimKeys": ("isArguments", "isArray", "isIndex", "isLength", "keysIn"),
    "sortedUniq": (),
    "toIterable": ("isLength", "isObject", "values"),
    "toObject": ("isObject",),
    "trimmedLeftIndex": ("isSpace",),
    "trimmedRightIndex": ("isSpace",),
    "unescapeHtmlChar": (),
    "words": ("baseToString",),
}

# =============================================================================
# VARIABLE DEPENDENCIES
# =============================================================================

VAR_DEPS: dict[str, tuple[str, ...]] = {
    "after": ("FUNC_ERROR_TEXT", "nativeIsFinite"),
    "arrayMax": ("NEGATIVE_INFINITY",),
    "arrayMin": ("POSITIVE_INFINITY",),
    "baseClone": ("cloneableTags", "objToString"),
    "baseCreate": ("root",),
    "baseDelay": ("FUNC_ERROR_TEXT",),
    "baseIsEqualDeep": ("argsTag", "arrayTag", "hasOwnProperty", "objToString", "objectTag"),
    "basePullAt": ("splice",),
    "baseRandom": ("nativeFloor", "nativeRandom"),
    "baseSetData": ("metaMap",),
    "before": ("FUNC_ERROR_TEXT",),
    "binaryIndexBy": ("MAX_ARRAY_INDEX", "nativeFloor", "nativeMin"),
    "bind": ("BIND_FLAG", "PARTIAL_FLAG"),
    "bindAll": ("BIND_FLAG",),
    "bindKey": ("BIND_FLAG", "BIND_KEY_FLAG", "PARTIAL_FLAG"),
    "bufferClone": ("ArrayBuffer", "Float64Array", "bufferSlice"),
    "chunk": ("nativeCeil", "nativeMax"),
    "compose": ("FUNC_ERROR_TEXT",),
    "composeArgs": ("nativeMax",),
    "composeArgsRight": ("nativeMax",),
    "contains": ("nativeMax",),
    "countBy": ("hasOwnProperty",),
    "createCache": ("Set", "nativeCreate"),
    "createPadding": ("nativeCeil",),
    "createWrapper": (
        "BIND_FLAG",
        "BIND_KEY_FLAG",
        "PARTIAL_FLAG",
        "PARTIAL_RIGHT_FLAG",
        "nativeMax",
    ),
    "curry": ("CURRY_FLAG",),
    "curryRight": ("CURRY_RIGHT_FLAG",),
    "debounce": ("FUNC_ERROR_TEXT", "clearTimeout", "nativeMax", "setTimeout"),
    "deburr": ("deburredLetters", "reLatin1"),
    "endsWith": ("nativeMin",),
    "equalByTag": ("boolTag", "dateTag", "errorTag", "numberTag", "regexpTag", "stringTag"),
    "escape": ("reHasUnescapedHtml", "reUnescapedHtml"),
    "escapeHtmlChar": ("htmlEscapes",),
    "escapeRegExp": ("reHasRegExpChars", "reRegExpChars"),
    "escapeStringChar": ("stringEscapes",),
    "getData": ("metaMap",),
    "groupBy": ("hasOwnProperty",),
    "has": ("hasOwnProperty",),
    "indexOf": ("nativeMax",),
    "initCloneArray": ("hasOwnProperty",),
    "initCloneByTag": (
        "boolTag",
        "dateTag",
        "numberTag",
        "regexpTag",
        "reFlags",
        "stringTag",
    ),
    "invert": ("hasOwnProperty",),
    "isArguments": ("argsTag", "objToString"),
    "isArray": ("arrayTag", "nativeIsArray", "objToString"),
    "isBoolean": ("boolTag", "objToString"),
    "isDate": ("dateTag", "objToString"),
    "isElement": ("objToString",),
    "isError": ("errorTag", "objToString"),
    "isFinite": ("nativeIsFinite", "nativeNumIsFinite"),
    "isFunction": ("funcTag", "objToString"),
    "isIndex": ("MAX_SAFE_INTEGER",),
    "isLength": ("MAX_SAFE_INTEGER",),
    "isNative": ("fnToString", "objToString", "reNative"),
    "isNumber": ("numberTag", "objToString"),
    "isRegExp": ("objToString", "regexpTag"),
    "isString": ("objToString", "stringTag"),
    "keys": ("nativeKeys",),
    "keysIn": ("hasOwnProperty",),
    "lastIndexOf": ("nativeMax", "nativeMin"),
    "lodash": ("hasOwnProperty",),
    "mapHas": ("hasOwnProperty",),
    "memoize": ("FUNC_ERROR_TEXT",),
    "mergeData": ("nativeMin",),
    "negate": ("FUNC_ERROR_TEXT",),
    "noConflict": ("oldDash", "root"),
    "now": ("nativeNow",),
    "pad": ("nativeCeil", "nativeFloor", "nativeIsFinite"),
    "parseInt": ("nativeParseInt", "reHexPrefix", "whitespace"),
    "partial": ("PARTIAL_FLAG",),
    "partialRight": ("PARTIAL_RIGHT_FLAG",),
    "pull": ("arrayProto", "splice"),
    "random": ("nativeMin", "nativeRandom"),
    "range": ("nativeCeil", "nativeMax"),
    "reorder": ("nativeMin",),
    "repeat": ("nativeFloor", "nativeIsFinite"),
    "replaceHolders": ("PLACEHOLDER",),
    "runInContext": ("context", "root"),
    "SetCache": ("nativeCreate",),
    "shimIsPlainObject": ("hasOwnProperty", "objToString", "objectTag"),
    "shimKeys": ("hasOwnProperty",),
    "startsWith": ("nativeMin",),
    "template": (
        "reEmptyStringLeading",
        "reEmptyStringMiddle",
        "reEmptyStringTrailing",
        "reEsTemplate",
        "reInterpolate",
        "reNoMatch",
        "reUnescapedString",
    ),
    "templateSettings": ("reEscape", "reEvaluate", "reInterpolate"),
    "throttle": ("FUNC_ERROR_TEXT",),
    "times": ("MAX_ARRAY_LENGTH", "nativeIsFinite", "nativeMin"),
    "trunc": ("DEFAULT_TRUNC_LENGTH", "DEFAULT_TRUNC_OMISSION", "reFlags"),
    "unescape": ("reEscapedHtml", "reHasEscapedHtml"),
    "unescapeHtmlChar": ("htmlUnescapes",),
    "uniqueId": ("idCounter",),
    "words": ("reWords",),
    "wrap": ("PARTIAL_FLAG",),
}

# =============================================================================
# OBJECT PROPERTY DEPENDENCIES
# =============================================================================

OBJ_DEPS: dict[str, tuple[str, ...]] = {
    "isArguments": ("support",),
    "isFunction": ("support",),
    "keys": ("support",),
    "lodash": ("support", "templateSettings"),
    "memoize": ("Cache",),
    "template": ("templateSettings",),
}

# =============================================================================
# CATEGORIES AND ALIASES
# =============================================================================

CATEGORIES: dict[str, tuple[str, ...]] = {
    "Array": (
        "chunk",
        "compact",
        "difference",
        "drop",
        "dropRight",
        "dropRightWhile",
        "dropWhile",
        "findIndex",
        "findLastIndex",
        "first",
        "flatten",
        "flattenDeep",
        "indexOf",
        "initial",
        "intersection",
        "last",
        "lastIndexOf",
        "pull",
        "pullAt",
        "remove",
        "rest",
        "slice",
        "sortedIndex",
        "sortedLastIndex",
        "take",
        "takeRight",
        "takeRightWhile",
        "takeWhile",
        "union",
        "uniq",
        "unzip",
        "without",
        "xor",
        "zip",
        "zipObject",
    ),
    "Chain": (
        "chain",
        "lodash",
        "tap",
        "thru",
        "wrapperChain",
        "wrapperToString",
        "wrapperValueOf",
    ),
    "Collection": (
        "at",
        "contains",
        "countBy",
        "every",
        "filter",
        "find",
        "findLast",
        "findWhere",
        "forEach",
        "forEachRight",
        "groupBy",
        "indexBy",
        "invoke",
        "map",
        "max",
        "min",
        "partition",
        "pluck",
        "reduce",
        "reduceRight",
        "reject",
        "sample",
        "shuffle",
        "size",
        "some",
        "sortBy",
        "toArray",
        "where",
    ),
    "Function": (
        "after",
        "before",
        "bind",
        "bindAll",
        "bindKey",
        "compose",
        "curry",
        "curryRight",
        "debounce",
        "defer",
        "delay",
        "memoize",
        "negate",
        "once",
        "partial",
        "partialRight",
        "throttle",
        "wrap",
    ),
    "Object": (
        "assign",
        "clone",
        "cloneDeep",
        "create",
        "defaults",
        "findKey",
        "findLastKey",
        "forIn",
        "forInRight",
        "forOwn",
        "forOwnRight",
        "functions",
        "has",
        "invert",
        "isArguments",
        "isArray",
        "isBoolean",
        "isDate",
        "isElement",
        "isEmpty",
        "isEqual",
        "isError",
        "isFinite",
        "isFunction",
        "isNaN",
        "isNull",
        "isNumber",
        "isObject",
        "isPlainObject",
        "isRegExp",
        "isString",
        "isUndefined",
        "keys",
        "keysIn",
        "mapValues",
        "merge",
        "omit",
        "pairs",
        "pick",
        "transform",
        "values",
        "valuesIn",
    ),
    "String": (
        "camelCase",
        "capitalize",
        "endsWith",
        "escape",
        "escapeRegExp",
        "kebabCase",
        "pad",
        "padLeft",
        "padRight",
        "repeat",
        "snakeCase",
        "startsWith",
        "template",
        "templateSettings",
        "trim",
        "trimLeft",
        "trimRight",
        "trunc",
        "unescape",
    ),
    "Utility": (
        "attempt",
        "callback",
        "constant",
        "identity",
        "matches",
        "mixin",
        "noConflict",
        "noop",
        "now",
        "parseInt",
        "property",
        "random",
        "range",
        "result",
        "runInContext",
        "times",
        "uniqueId",
    ),
}

# Canonical name -> aliases. The reverse direction is derived on load.
ALIASES: dict[str, tuple[str, ...]] = {
    "assign": ("extend",),
    "callback": ("iteratee",),
    "contains": ("include",),
    "every": ("all",),
    "filter": ("select",),
    "find": ("detect",),
    "first": ("head",),
    "forEach": ("each",),
    "forEachRight": ("eachRight",),
    "functions": ("methods",),
    "map": ("collect",),
    "reduce": ("foldl", "inject"),
    "reduceRight": ("foldr",),
    "rest": ("tail",),
    "some": ("any",),
    "uniq": ("unique",),
    "wrapperValueOf": ("toJSON", "value"),
    "zipObject": ("object",),
}

# =============================================================================
# SPECIAL LISTS
# =============================================================================

# Public names that are objects rather than callable functions.
NON_FUNCTIONS: tuple[str, ...] = ("templateSettings",)

# Dependencies that may only be referenced at the top level of the source.
TOP_LEVEL_DEPS: tuple[str, ...] = ("main",)

# Changing these does not warrant a minor version bump.
LAX_SEMVER_DEPS: tuple[str, ...] = (
    "isArguments",
    "isArray",
    "isBoolean",
    "isDate",
    "isElement",
    "isError",
    "isFinite",
    "isFunction",
    "isLength",
    "isNaN",
    "isNative",
    "isNull",
    "isNumber",
    "isObject",
    "isObjectLike",
    "isRegExp",
    "isString",
    "isUndefined",
)

PLACEHOLDER_FUNCS: tuple[str, ...] = (
    "bind",
    "bindKey",
    "curry",
    "curryRight",
    "partial",
    "partialRight",
)

CORE_FUNCS: tuple[str, ...] = (
    "assign",
    "before",
    "bind",
    "chain",
    "clone",
    "compact",
    "create",
    "defaults",
    "defer",
    "delay",
    "escape",
    "every",
    "filter",
    "find",
    "flatten",
    "flattenDeep",
    "forEach",
    "has",
    "head",
    "identity",
    "indexOf",
    "isArguments",
    "isArray",
    "isBoolean",
    "isDate",
    "isEmpty",
    "isEqual",
    "isFinite",
    "isFunction",
    "isNaN",
    "isNull",
    "isNumber",
    "isObject",
    "isRegExp",
    "isString",
    "isUndefined",
    "iteratee",
    "keys",
    "last",
    "map",
    "matches",
    "max",
    "min",
    "mixin",
    "negate",
    "noConflict",
    "noop",
    "once",
    "pick",
    "reduce",
    "result",
    "size",
    "slice",
    "some",
    "sortBy",
    "tap",
    "thru",
    "toArray",
    "uniqueId",
    "value",
    "values",
)

# Variables whose assignments span several statements.
COMPLEX_VARS: tuple[str, ...] = (
    "cloneableTags",
    "reWords",
    "stringEscapes",
)

# Included functions that are small enough to be inlined into callers.
INLINABLE_FUNCS: tuple[str, ...] = (
    "constant",
    "drop",
    "dropRight",
    "filter",
    "first",
    "identity",
    "isArguments",
    "isArray",
    "isBoolean",
    "isDate",
    "isElement",
    "isError",
    "isFinite",
    "isFunction",
    "isLength",
    "isNaN",
    "isNative",
    "isNull",
    "isNumber",
    "isObject",
    "isObjectLike",
    "isRegExp",
    "isString",
    "isUndefined",
    "last",
    "matches",
    "noop",
    "now",
    "pluck",
    "property",
    "values",
    "wrap",
)

# Helpers and variables that stay standalone whether or not they are included.
UNINLINABLE_HELPERS: tuple[str, ...] = (
    "MapCache",
    "SetCache",
    "arrayEach",
    "arrayFilter",
    "arrayMap",
    "baseEach",
    "baseEachRight",
    "baseFilter",
    "baseFind",
    "baseFlatten",
    "baseFor",
    "baseIsEqual",
    "baseIsMatch",
    "basePullAt",
    "baseReduce",
    "baseSlice",
    "baseUniq",
    "cacheIndexOf",
    "charsLeftIndex",
    "charsRightIndex",
    "createWrapper",
    "reEscape",
    "reEvaluate",
    "reInterpolate",
    "templateSettings",
)

# Default ways to export the lodash function.
EXPORT_FORMATS: tuple[str, ...] = ("amd", "global", "iojs", "node", "umd")

# =============================================================================
# MINIFICATION WHITELIST SOURCES
# =============================================================================

# Public properties of the lodash function that are not dependency graph nodes.
PUBLIC_PROPERTIES: tuple[str, ...] = ("VERSION", "support")

# Properties of the wrapper prototype beyond the mixed-in public functions.
PROTOTYPE_PROPERTIES: tuple[str, ...] = (
    "chain",
    "toJSON",
    "toString",
    "value",
    "valueOf",
)

SUPPORT_KEYS: tuple[str, ...] = ("dom", "funcDecomp", "funcNames", "nonEnumArgs")

TEMPLATE_SETTINGS_KEYS: tuple[str, ...] = (
    "escape",
    "evaluate",
    "imports",
    "interpolate",
    "variable",
)

RESERVED_IDENTIFIERS: tuple[str, ...] = (
    "BYTES_PER_ELEMENT",
    "Array",
    "ArrayBuffer",
    "Boolean",
    "Date",
    "Error",
    "Float32Array",
    "Float64Array",
    "Function",
    "Int8Array",
    "Int16Array",
    "Int32Array",
    "Math",
    "Number",
    "Object",
    "RegExp",
    "Set",
    "String",
    "TypeError",
    "Uint8Array",
    "Uint8ClampedArray",
    "Uint16Array",
    "Uint32Array",
    "WinRTError",
    "__chain__",
    "__wrapped__",
    "add",
    "amd",
    "buffer",
    "byteLength",
    "cache",
    "cancel",
    "clearTimeout",
    "configurable",
    "createDocumentFragment",
    "criteria",
    "document",
    "enumerable",
    "exports",
    "global",
    "index",
    "leading",
    "length",
    "maxWait",
    "name",
    "nodeType",
    "omission",
    "self",
    "separator",
    "set",
    "setImmediate",
    "setTimeout",
    "source",
    "trailing",
    "value",
    "window",
    "writable",
)
