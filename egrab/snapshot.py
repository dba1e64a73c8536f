"""Read a live element out of a Playwright page.

The browser does everything that needs the live DOM (computed values,
stylesheet access, selector matching) in one ``page.evaluate`` call; the
payload is then turned into ``ElementNode``/``PageDocument`` objects.
"""

from typing import Any, Dict, List, Optional, Tuple

from playwright.async_api import async_playwright, Page

from egrab.capture import run_action
from egrab.constants import COMPUTED_PROPS, DEFAULT_VIEWPORT
from egrab.dom import (
    Declaration,
    ElementNode,
    PageDocument,
    ScriptBlock,
    StyleRule,
    StyleSheet,
    parse_declarations,
)
from egrab.report import CaptureReport, SnapshotError

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

SNAPSHOT_SCRIPT = """([selector, props]) => {
    const root = document.querySelector(selector);

    const stylesheets = [];
    const selectors = new Set();
    for (const sheet of Array.from(document.styleSheets)) {
        const entry = { href: sheet.href, rules: null, error: null };
        try {
            const rules = sheet.cssRules || sheet.rules;
            entry.rules = [];
            for (const rule of Array.from(rules || [])) {
                const isStyle = rule.type === CSSRule.STYLE_RULE;
                const declarations = [];
                if (isStyle) {
                    selectors.add(rule.selectorText);
                    for (let i = 0; i < rule.style.length; i++) {
                        const name = rule.style[i];
                        declarations.push({
                            name,
                            value: rule.style.getPropertyValue(name),
                            important: rule.style.getPropertyPriority(name) === 'important',
                        });
                    }
                }
                entry.rules.push({
                    kind: isStyle ? 'style' : 'other',
                    selector: isStyle ? rule.selectorText : '',
                    declarations,
                });
            }
        } catch (e) {
            entry.rules = null;
            entry.error = String(e && e.message ? e.message : e);
        }
        stylesheets.push(entry);
    }

    const scripts = Array.from(document.querySelectorAll('script')).map(s => ({
        src: s.getAttribute('src'),
        text: s.src ? '' : (s.textContent || ''),
    }));

    if (!root) {
        return { found: false, stylesheets, scripts };
    }

    const selectorList = Array.from(selectors);
    const describe = (el, withMarkup) => {
        let computed = null;
        try {
            const style = window.getComputedStyle(el);
            computed = {};
            props.forEach(p => { computed[p] = style.getPropertyValue(p); });
        } catch (e) {
            computed = null;
        }
        const matched = selectorList.filter(sel => {
            try { return el.matches(sel); } catch (e) { return false; }
        });
        let outerHTML = '';
        if (withMarkup) {
            const clone = el.cloneNode(true);
            clone.querySelectorAll('[id^="egrab-"], .egrab-element').forEach(n => n.remove());
            outerHTML = clone.outerHTML;
        }
        return {
            tag: el.tagName,
            id: el.id || '',
            className: typeof el.className === 'string' ? el.className : null,
            classList: Array.from(el.classList || []),
            style: el.style ? el.style.cssText : '',
            attributes: Array.from(el.attributes).map(a => [a.name, a.value]),
            outerHTML,
            computed,
            matched,
            children: Array.from(el.children).map(child => describe(child, false)),
        };
    };

    return { found: true, root: describe(root, true), stylesheets, scripts };
}"""


def node_from_payload(data: Dict[str, Any]) -> ElementNode:
    tag = data.get("tag") or ""
    if not tag:
        raise SnapshotError("Snapshot node has no tag name")
    computed = data.get("computed")
    classes = data.get("classList")
    return ElementNode(
        tag_name=tag,
        id=data.get("id") or "",
        class_name=data.get("className"),
        classes=classes if isinstance(classes, list) else None,
        inline_style=parse_declarations(data.get("style") or ""),
        attributes={name: value for name, value in data.get("attributes") or []},
        outer_html=data.get("outerHTML") or "",
        children=[node_from_payload(child) for child in data.get("children") or []],
        computed_style=dict(computed) if isinstance(computed, dict) else None,
        matched_selectors=set(data.get("matched") or []),
    )


def stylesheet_from_payload(data: Dict[str, Any]) -> StyleSheet:
    rules = data.get("rules")
    if rules is None:
        return StyleSheet(href=data.get("href"), rules=None, error=data.get("error") or "Access denied")
    return StyleSheet(
        href=data.get("href"),
        rules=[
            StyleRule(
                selector=rule.get("selector") or "",
                declarations=[
                    Declaration(d.get("name", ""), d.get("value", ""), bool(d.get("important")))
                    for d in rule.get("declarations") or []
                ],
                kind=rule.get("kind") or "style",
            )
            for rule in rules
        ],
    )


def document_from_payload(payload: Dict[str, Any]) -> Tuple[Optional[ElementNode], PageDocument]:
    if not isinstance(payload, dict):
        raise SnapshotError(f"Unexpected snapshot payload: {type(payload).__name__}")

    stylesheets = [stylesheet_from_payload(s) for s in payload.get("stylesheets") or []]
    scripts = [ScriptBlock(text=s.get("text") or "", src=s.get("src")) for s in payload.get("scripts") or []]
    document = PageDocument(stylesheets=stylesheets, scripts=scripts)

    blocked = [sheet.href or "inline" for sheet in stylesheets if not sheet.accessible]
    for href in blocked:
        document.limits.append(f"Stylesheet rules not readable (likely CORS): {href}")

    root = None
    if payload.get("found") and payload.get("root"):
        root = node_from_payload(payload["root"])
    return root, document


async def snapshot_element(page: Page, selector: str) -> Tuple[Optional[ElementNode], PageDocument]:
    payload = await page.evaluate(SNAPSHOT_SCRIPT, [selector, COMPUTED_PROPS])
    return document_from_payload(payload)


async def capture_page(page: Page, selector: str, action: str = "all") -> Tuple[CaptureReport, List[str]]:
    root, document = await snapshot_element(page, selector)
    limits = list(document.limits)
    if root is None:
        limits.append(f"No element matches selector '{selector}'")
    return run_action(action, root, document), limits


async def capture_url(
    url: str,
    selector: str,
    action: str = "all",
    headed: bool = False,
    wait_ms: int = 1000,
    timeout_ms: int = 60000,
    viewport: Optional[Dict[str, int]] = None,
) -> Tuple[CaptureReport, List[str]]:
    limits: List[str] = []
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=not headed)
        context = await browser.new_context(
            viewport=viewport or DEFAULT_VIEWPORT,
            device_scale_factor=1,
            user_agent=USER_AGENT,
        )
        page = await context.new_page()
        try:
            await page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
            await page.wait_for_selector("body", state="attached", timeout=15000)
            try:
                await page.wait_for_load_state("networkidle", timeout=15000)
            except Exception:
                limits.append("Network did not go idle; capturing current state")
            if wait_ms:
                await page.wait_for_timeout(wait_ms)

            report, capture_limits = await capture_page(page, selector, action)
            limits.extend(capture_limits)
        finally:
            await context.close()
            await browser.close()
    return report, limits
