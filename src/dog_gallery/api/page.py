"""Static gallery page served at the root path."""

GALLERY_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Dog Gallery</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      .row { margin-bottom: 1rem; }
      input { padding: 0.4rem 0.6rem; width: 240px; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      .grid { display: flex; flex-wrap: wrap; gap: 1rem; }
      .dog-image-card { width: 200px; }
      .dog-image-card img { width: 200px; height: 200px; object-fit: cover; }
      #app-message { padding: 10px; border-radius: 5px; font-weight: bold; }
      .info { background: #e2e3e5; color: #383d41; }
      .success { background: #d4edda; color: #155724; }
      .error { background: #f8d7da; color: #721c24; }
    </style>
  </head>
  <body>
    <h1>Dog Gallery</h1>
    <div id="app-message"></div>
    <div class="row">
      <input id="breed-input" placeholder="Breed name" />
      <button onclick="search()">Search</button>
      <button onclick="send('POST', '/api/clear')">Clear</button>
    </div>
    <div class="row">
      <button id="prev-page" onclick="send('POST', '/api/page/previous')">Previous</button>
      <button id="next-page" onclick="send('POST', '/api/page/next')">Next</button>
      <span id="page-label"></span>
    </div>
    <div id="gallery" class="grid"></div>
    <h2>Favorites</h2>
    <div id="favorites" class="grid"></div>
    <script>
      async function send(method, path, body) {
        const options = { method, headers: { 'Content-Type': 'application/json' } };
        if (body) { options.body = JSON.stringify(body); }
        const res = await fetch(path, options);
        render(await res.json());
      }
      function search() {
        send('POST', '/api/search', { name: document.getElementById('breed-input').value });
      }
      function press(card) {
        if (card.button_action === 'favorite') {
          send('POST', '/api/favorites', { image_id: card.image_id });
        } else {
          send('DELETE', '/api/favorites/' + card.favorite_id);
        }
      }
      function fill(name, cards) {
        const container = document.getElementById(name);
        container.innerHTML = '';
        for (const card of cards) {
          const div = document.createElement('div');
          div.className = 'dog-image-card';
          const img = document.createElement('img');
          img.src = card.url;
          img.alt = card.alt;
          img.loading = 'lazy';
          div.appendChild(img);
          if (card.button_text) {
            const button = document.createElement('button');
            button.textContent = card.button_text;
            button.className = card.button_class;
            button.onclick = () => press(card);
            div.appendChild(button);
          }
          container.appendChild(div);
        }
      }
      function render(view) {
        fill('gallery', view.containers.gallery);
        fill('favorites', view.containers.favorites);
        document.getElementById('prev-page').disabled = !view.paging.prev;
        document.getElementById('next-page').disabled = !view.paging.next;
        document.getElementById('page-label').textContent = 'Page ' + (view.query.current_page + 1);
        document.getElementById('breed-input').value = view.search_input;
        const message = document.getElementById('app-message');
        message.textContent = view.notice ? view.notice.message : '';
        message.className = view.notice ? view.notice.level : '';
      }
      fetch('/api/view').then((res) => res.json()).then(render);
    </script>
  </body>
</html>
"""
